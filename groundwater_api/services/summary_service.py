from typing import Optional, Sequence, Tuple
from groundwater_api.exceptions import NotFoundError
from groundwater_api.schemas.trend import PeriodSummary, TrendReport
from groundwater_api.schemas.water_record import WaterRecord
from groundwater_api.services.trend_indicator_service import TrendIndicatorService
from groundwater_api.services.water_score_service import ScoreCalculator, default_score_calculator, score_band
from groundwater_api.state import state
import logging

logger = logging.getLogger(__name__)


class SummaryService:
	"""Monitoring-period summaries and the combined trend report."""

	@staticmethod
	def describe_change(first: Optional[float], last: Optional[float], up_label: str, down_label: str) -> Tuple[Optional[float], Optional[str]]:
		"""
		Difference last - first and its label. A zero change counts as down.

		Returns:
			(change, label), or (None, None) when either value is missing
		"""
		if first is None or last is None:
			return None, None
		change = round(last - first, 2)
		return change, up_label if change > 0 else down_label

	@staticmethod
	def build_period_summary(
		location: str,
		records: Sequence[WaterRecord],
		score_calculator: Optional[ScoreCalculator] = None
	) -> PeriodSummary:
		"""
		Summarise first-to-last change over a series.

		Args:
			location: Location name
			records: Yearly records in any order
			score_calculator: Used when the latest record carries no water score

		Returns:
			PeriodSummary; change fields stay empty for fewer than two records
		"""
		summary = PeriodSummary(location=location, record_count=len(records))
		if not records:
			return summary

		ordered = sorted(records, key=lambda r: r.year)
		first, last = ordered[0], ordered[-1]
		summary.first_year = first.year
		summary.last_year = last.year

		latest_score = last.water_score
		if latest_score is None:
			latest_score = (score_calculator or default_score_calculator).calculate(last)
		summary.latest_water_score = latest_score
		summary.latest_score_band = score_band(latest_score)

		if len(ordered) < 2:
			return summary

		summary.water_level_change, summary.water_level_trend = SummaryService.describe_change(
			first.groundwater_level, last.groundwater_level, "Rising", "Falling"
		)
		summary.rainfall_change, summary.rainfall_trend = SummaryService.describe_change(
			first.rainfall, last.rainfall, "Increasing", "Decreasing"
		)
		summary.depletion_change, summary.depletion_trend = SummaryService.describe_change(
			first.depletion_rate, last.depletion_rate, "Worsening", "Improving"
		)
		return summary

	@staticmethod
	def get_trend_report(location: str) -> TrendReport:
		"""
		Year-over-year indicators plus period summary for a stored location.

		Raises:
			NotFoundError: If no records exist for the location
		"""
		records = state.get_records(location)
		if not records:
			raise NotFoundError("Location", location)
		logger.info(f"Building trend report for {location} over {len(records)} records")
		return TrendReport(
			location=location,
			indicators=TrendIndicatorService.get_indicators(records),
			summary=SummaryService.build_period_summary(location, records),
		)
