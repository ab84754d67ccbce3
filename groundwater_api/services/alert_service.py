from typing import List, Optional, Sequence
from groundwater_api.exceptions import NotFoundError
from groundwater_api.schemas.alert import Alert
from groundwater_api.schemas.thresholds import AlertThresholds, ALERT_THRESHOLDS
from groundwater_api.schemas.water_record import WaterRecord
from groundwater_api.services.alert_evaluator import AlertEvaluator
from groundwater_api.services.trend_scanner import TrendScanner
from groundwater_api.services.water_score_service import ScoreCalculator
from groundwater_api.state import state
from groundwater_api.utils.datetime_utils import utc_timestamp
import logging

logger = logging.getLogger(__name__)


class AlertService:
	"""Service layer combining threshold and trend alerts."""

	@staticmethod
	def generate_alerts(
		record: WaterRecord,
		history: Optional[Sequence[WaterRecord]] = None,
		thresholds: AlertThresholds = ALERT_THRESHOLDS,
		score_calculator: Optional[ScoreCalculator] = None
	) -> List[Alert]:
		"""
		Evaluate a record and, when a history of 3+ records is given, scan it for trends.

		Args:
			record: Current year's record
			history: Optional unordered yearly history for the same location
			thresholds: Threshold table, the fixed constants unless a test injects others
			score_calculator: Health score collaborator for the trend scan

		Returns:
			Threshold alerts in fixed category order, followed by trend alerts.
			Every alert carries the same timestamp.
		"""
		timestamp = utc_timestamp()
		alerts = AlertEvaluator(thresholds).evaluate(record, timestamp)

		if history and len(history) >= TrendScanner.MIN_HISTORY:
			alerts.extend(TrendScanner(score_calculator).scan(record.location, record, history, timestamp))

		logger.info(f"Generated {len(alerts)} alerts for {record.location} {record.year}")
		return alerts

	@staticmethod
	def get_alerts_for_location(location: str) -> List[Alert]:
		"""
		Generate alerts for the latest stored record of a location using its full history.

		Args:
			location: Location name

		Returns:
			List of alerts

		Raises:
			NotFoundError: If no records exist for the location
		"""
		history = state.get_records(location)
		if not history:
			raise NotFoundError("Location", location)
		return AlertService.generate_alerts(history[-1], history)
