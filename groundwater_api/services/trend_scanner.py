from typing import Callable, List, Optional, Sequence, Tuple
from groundwater_api.schemas.alert import Alert, AlertType, AlertCategory
from groundwater_api.schemas.water_record import WaterRecord
from groundwater_api.services.water_score_service import ScoreCalculator, default_score_calculator
from groundwater_api.utils.datetime_utils import utc_timestamp
from groundwater_api.utils.formatting import format_value, round_half_up
import logging

logger = logging.getLogger(__name__)


class TrendScanner:
	"""
	Detects sustained multi-year trends in a location's history.

	Streaks are trailing: only the run of strictly worsening year-over-year
	steps that ends at the latest record counts, never an earlier run.
	"""

	MIN_HISTORY = 3
	MIN_STREAK = 3
	# points the second-half average score must fall below the first-half average
	HEALTH_DECLINE_MARGIN = 10

	def __init__(self, score_calculator: Optional[ScoreCalculator] = None):
		self.score_calculator = score_calculator or default_score_calculator

	def scan(
		self,
		location: str,
		current_record: WaterRecord,
		history: Sequence[WaterRecord],
		timestamp: Optional[str] = None
	) -> List[Alert]:
		"""
		Scan a history for sustained trends.

		Args:
			location: Location name used in alert text
			current_record: Latest record, quoted in the depletion trend message
			history: Yearly records in any order, never mutated
			timestamp: Shared generation time, defaults to now

		Returns:
			Trend alerts in order: water level, depletion, rainfall, overall health.
			Empty when the history has fewer than 3 records.
		"""
		if len(history) < self.MIN_HISTORY:
			logger.debug(f"Skipping trend scan for {location}: {len(history)} records")
			return []

		timestamp = timestamp or utc_timestamp()
		ordered = sorted(history, key=lambda r: r.year)
		alerts = []

		level_streak = self.trailing_streak([r.groundwater_level for r in ordered], rising=True)
		if level_streak >= self.MIN_STREAK:
			total_rise = ordered[-1].groundwater_level - ordered[-1 - level_streak].groundwater_level
			alerts.append(Alert(
				type=AlertType.WARNING,
				category=AlertCategory.TREND,
				title="📉 Sustained Water Level Decline",
				message=f"Water level in {location} has been dropping for {level_streak} consecutive years ({total_rise:.1f}m increase in depth).",
				value=level_streak,
				recommendation="Long-term recharge intervention needed. Consider artificial recharge structures.",
				timestamp=timestamp,
			))

		depletion_streak = self.trailing_streak([r.depletion_rate for r in ordered], rising=True)
		if depletion_streak >= self.MIN_STREAK:
			alerts.append(Alert(
				type=AlertType.CRITICAL,
				category=AlertCategory.TREND,
				title="📊 Accelerating Depletion Trend",
				message=f"Depletion rate in {location} has increased for {depletion_streak} consecutive years. Current: {format_value(current_record.depletion_rate)}%.",
				value=depletion_streak,
				recommendation="Urgent policy intervention needed. Restrict new extraction permits.",
				timestamp=timestamp,
			))

		rainfall_streak = self.trailing_streak([r.rainfall for r in ordered], rising=False)
		if rainfall_streak >= self.MIN_STREAK:
			alerts.append(Alert(
				type=AlertType.WARNING,
				category=AlertCategory.TREND,
				title="🌧️ Declining Rainfall Pattern",
				message=f"Rainfall in {location} has decreased for {rainfall_streak} consecutive years. Long-term drought risk elevated.",
				value=rainfall_streak,
				recommendation="Plan for drought resilience. Increase water storage capacity.",
				timestamp=timestamp,
			))

		health_alert = self.check_health_decline(location, ordered, timestamp)
		if health_alert is not None:
			alerts.append(health_alert)

		logger.debug(f"Trend scan for {location} over {len(ordered)} records produced {len(alerts)} alerts")
		return alerts

	@staticmethod
	def trailing_streak(values: Sequence[Optional[float]], rising: bool) -> int:
		"""
		Count the consecutive strictly-moving steps that end at the last value.

		Any equal, opposite or unknown step resets the counter to zero.

		Args:
			values: Metric values in chronological order
			rising: True to count increases, False to count decreases

		Returns:
			Number of steps in the trailing run
		"""
		moved: Callable[[float, float], bool] = (lambda prev, cur: cur > prev) if rising else (lambda prev, cur: cur < prev)
		streak = 0
		for prev, cur in zip(values, values[1:]):
			if prev is not None and cur is not None and moved(prev, cur):
				streak += 1
			else:
				streak = 0
		return streak

	@staticmethod
	def split_half_means(scores: Sequence[float]) -> Optional[Tuple[float, float]]:
		"""
		Average the first floor(n/2) scores and the remaining scores.

		For odd n the middle score belongs to the second half.

		Returns:
			(first_mean, second_mean), or None when either half is empty
		"""
		middle = len(scores) // 2
		first_half = scores[:middle]
		second_half = scores[middle:]
		if not first_half or not second_half:
			return None
		return sum(first_half) / len(first_half), sum(second_half) / len(second_half)

	def check_health_decline(self, location: str, ordered: Sequence[WaterRecord], timestamp: str) -> Optional[Alert]:
		scores = [self.score_calculator.calculate(record) for record in ordered]
		means = self.split_half_means(scores)
		if means is None:
			return None
		avg_first, avg_second = means
		if avg_second < avg_first - self.HEALTH_DECLINE_MARGIN:
			return Alert(
				type=AlertType.WARNING,
				category=AlertCategory.TREND,
				title="⚡ Overall Water Health Declining",
				message=f"Water health score in {location} has declined significantly (avg {round_half_up(avg_first)} → {round_half_up(avg_second)}) over the monitoring period.",
				value=round_half_up(avg_second - avg_first),
				recommendation="Comprehensive water management review recommended for this location.",
				timestamp=timestamp,
			)
		return None
