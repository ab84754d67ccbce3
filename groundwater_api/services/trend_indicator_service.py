from typing import List, Optional, Sequence
from groundwater_api.schemas.trend import TrendIndicator, TrendDirection
from groundwater_api.schemas.water_record import WaterRecord
import logging

logger = logging.getLogger(__name__)


# (field, label, unit, up is bad)
INDICATOR_METRICS = [
	("groundwater_level", "Water Level", "m", True),
	("rainfall", "Rainfall", "mm", False),
	("depletion_rate", "Depletion Rate", "%", True),
	("ph", "pH Level", "", False),
]

# changes smaller than this many percent are reported as neutral
NEUTRAL_CHANGE_PCT = 1.0


class TrendIndicatorService:
	"""Year-over-year change badges for the latest two records."""

	@staticmethod
	def percent_change(current: Optional[float], previous: Optional[float]) -> Optional[float]:
		"""
		Percentage change from previous to current relative to |previous|.

		Returns:
			None when either value is missing or previous is zero
		"""
		if current is None or previous is None or previous == 0:
			return None
		return (current - previous) / abs(previous) * 100

	@staticmethod
	def build_indicator(metric: str, label: str, unit: str, invert: bool, current: WaterRecord, previous: WaterRecord) -> Optional[TrendIndicator]:
		current_value = getattr(current, metric)
		previous_value = getattr(previous, metric)
		change = TrendIndicatorService.percent_change(current_value, previous_value)
		if change is None:
			logger.debug(f"No {metric} indicator for {current.location}: current={current_value}, previous={previous_value}")
			return None

		is_up = change > 0
		if abs(change) < NEUTRAL_CHANGE_PCT:
			direction = TrendDirection.NEUTRAL
		else:
			direction = TrendDirection.UP if is_up else TrendDirection.DOWN

		return TrendIndicator(
			label=label,
			metric=metric,
			unit=unit,
			current=current_value,
			previous=previous_value,
			change_pct=round(change, 1),
			direction=direction,
			is_good=not is_up if invert else is_up,
		)

	@staticmethod
	def get_indicators(records: Sequence[WaterRecord]) -> List[TrendIndicator]:
		"""
		Compare the two most recent records of a series.

		Args:
			records: Yearly records in any order

		Returns:
			One indicator per metric that has both values and a non-zero previous value.
			Empty for fewer than two records.
		"""
		if len(records) < 2:
			return []
		ordered = sorted(records, key=lambda r: r.year)
		previous, current = ordered[-2], ordered[-1]

		indicators = []
		for metric, label, unit, invert in INDICATOR_METRICS:
			indicator = TrendIndicatorService.build_indicator(metric, label, unit, invert, current, previous)
			if indicator is not None:
				indicators.append(indicator)
		return indicators
