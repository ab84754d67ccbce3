from typing import List, Optional, Sequence
from datetime import date
from groundwater_api.config import settings
from groundwater_api.exceptions import NotFoundError
from groundwater_api.schemas.gov_update import GovUpdate, UpdatePriority
from groundwater_api.schemas.thresholds import ALERT_THRESHOLDS
from groundwater_api.schemas.water_record import WaterRecord, ScarcityLevel
from groundwater_api.state import state
from groundwater_api.utils.datetime_utils import format_en_in_date
from groundwater_api.utils.formatting import format_value
import logging

logger = logging.getLogger(__name__)


STATUS_HIGH_PRIORITY_LEVELS = (ScarcityLevel.SEVERE, ScarcityLevel.EXTREME)
# The Jal Shakti advisory flags High and Severe, not Extreme
INTERVENTION_LEVELS = (ScarcityLevel.HIGH, ScarcityLevel.SEVERE)


class AdvisoryService:
	"""Builds the five government-style status updates for a location's latest record."""

	@staticmethod
	def generate_gov_updates(latest: WaterRecord, today: Optional[date] = None) -> List[GovUpdate]:
		"""
		Generate the fixed set of updates for one record.

		Args:
			latest: Most recent record for the location
			today: Date stamped on every update, defaults to today

		Returns:
			Exactly five updates with ids 1-5
		"""
		issued = format_en_in_date(today)
		low_rainfall = latest.rainfall is not None and latest.rainfall < ALERT_THRESHOLDS.low_rainfall
		ph_acceptable = latest.ph is not None and ALERT_THRESHOLDS.low_ph <= latest.ph <= ALERT_THRESHOLDS.high_ph
		needs_intervention = latest.scarcity_level in INTERVENTION_LEVELS

		updates = [
			GovUpdate(
				id=1,
				title="Groundwater Status Report",
				body=(
					f"Current groundwater level in {latest.location} stands at {format_value(latest.groundwater_level)}m. "
					f"Depletion rate: {format_value(latest.depletion_rate)}%. Classification: {format_value(latest.scarcity_level)}."
				),
				date=issued,
				source="Central Ground Water Board",
				priority=UpdatePriority.HIGH if latest.scarcity_level in STATUS_HIGH_PRIORITY_LEVELS else UpdatePriority.NORMAL,
			),
			GovUpdate(
				id=2,
				title="Rainfall Monitoring Update",
				body=(
					f"Annual rainfall recorded: {format_value(latest.rainfall)}mm. "
					+ ("Below normal levels. Drought alert issued." if low_rainfall else "Within normal range.")
				),
				date=issued,
				source="India Meteorological Department",
				priority=UpdatePriority.HIGH if low_rainfall else UpdatePriority.NORMAL,
			),
			GovUpdate(
				id=3,
				title="Water Quality Assessment",
				body=(
					f"pH level: {format_value(latest.ph)}. "
					+ ("Water quality is within acceptable BIS standards." if ph_acceptable else "Water quality needs attention.")
				),
				date=issued,
				source="State Pollution Control Board",
			),
			GovUpdate(
				id=4,
				title="Usage Distribution Report",
				body=(
					f"Agricultural: {format_value(latest.agricultural_usage)} Ml | "
					f"Industrial: {format_value(latest.industrial_usage)} Ml | "
					f"Household: {format_value(latest.household_usage)} Ml. "
					f"Total consumption: {format_value(latest.total_consumption)} Ml."
				),
				date=issued,
				source=settings.advisory_district_authority,
			),
			GovUpdate(
				id=5,
				title="Jal Shakti Abhiyan Advisory",
				body=(
					f"Under the National Jal Jeevan Mission, {latest.location} is "
					+ (
						"marked for priority intervention. Community rainwater harvesting programs recommended."
						if needs_intervention
						else "under regular monitoring. Continue existing conservation measures."
					)
				),
				date=issued,
				source="Ministry of Jal Shakti",
				priority=UpdatePriority.HIGH if needs_intervention else UpdatePriority.NORMAL,
			),
		]
		return updates

	@staticmethod
	def generate_gov_updates_for_series(records: Sequence[WaterRecord], today: Optional[date] = None) -> List[GovUpdate]:
		"""
		Generate updates for the latest record of a series.

		Returns:
			Five updates, or an empty list for an empty series
		"""
		if not records:
			return []
		latest = max(records, key=lambda r: r.year)
		return AdvisoryService.generate_gov_updates(latest, today)

	@staticmethod
	def get_updates_for_location(location: str) -> List[GovUpdate]:
		"""
		Raises:
			NotFoundError: If no records exist for the location
		"""
		records = state.get_records(location)
		if not records:
			raise NotFoundError("Location", location)
		logger.info(f"Generating status updates for {location} ({records[-1].year})")
		return AdvisoryService.generate_gov_updates_for_series(records)
