from typing import Callable, List, Optional
from groundwater_api.schemas.alert import Alert, AlertType, AlertCategory
from groundwater_api.schemas.thresholds import AlertThresholds, ALERT_THRESHOLDS
from groundwater_api.schemas.water_record import WaterRecord, ScarcityLevel
from groundwater_api.utils.datetime_utils import utc_timestamp
from groundwater_api.utils.formatting import format_value
import logging

logger = logging.getLogger(__name__)


CRITICAL_SCARCITY_LEVELS = (ScarcityLevel.SEVERE, ScarcityLevel.EXTREME)


class AlertEvaluator:
	"""
	Point-in-time threshold checks for a single record.

	Each check yields at most one alert, critical taking precedence over warning
	within a metric. Output order is fixed: Water Level, Depletion, Rainfall,
	Water Quality, Consumption, Scarcity. A missing metric never triggers.
	"""

	def __init__(self, thresholds: AlertThresholds = ALERT_THRESHOLDS):
		self.thresholds = thresholds

	@property
	def checks(self) -> List[Callable[[WaterRecord, str], Optional[Alert]]]:
		return [
			self.check_water_level,
			self.check_depletion,
			self.check_rainfall,
			self.check_ph,
			self.check_consumption,
			self.check_scarcity,
		]

	def evaluate(self, record: WaterRecord, timestamp: Optional[str] = None) -> List[Alert]:
		"""
		Run every threshold check against a record.

		Args:
			record: Current year's record
			timestamp: Shared generation time, defaults to now

		Returns:
			Alerts in fixed category order
		"""
		timestamp = timestamp or utc_timestamp()
		alerts = []
		for check in self.checks:
			alert = check(record, timestamp)
			if alert is not None:
				alerts.append(alert)
		logger.debug(f"Threshold checks for {record.location} {record.year} produced {len(alerts)} alerts")
		return alerts

	def check_water_level(self, record: WaterRecord, timestamp: str) -> Optional[Alert]:
		level = record.groundwater_level
		if level is None:
			return None
		display = format_value(level)
		if level >= self.thresholds.critical_water_level:
			return Alert(
				type=AlertType.CRITICAL,
				category=AlertCategory.WATER_LEVEL,
				title="🚨 Critical Water Level",
				message=f"Groundwater level at {display}m depth in {record.location}. Immediate action required.",
				value=level,
				threshold=self.thresholds.critical_water_level,
				recommendation="Implement water rationing and emergency recharge measures.",
				timestamp=timestamp,
			)
		if level >= self.thresholds.warning_water_level:
			return Alert(
				type=AlertType.WARNING,
				category=AlertCategory.WATER_LEVEL,
				title="⚠️ Low Water Table",
				message=f"Water table at {display}m in {record.location}. Monitor closely.",
				value=level,
				threshold=self.thresholds.warning_water_level,
				recommendation="Increase monitoring frequency. Consider water conservation measures.",
				timestamp=timestamp,
			)
		return None

	def check_depletion(self, record: WaterRecord, timestamp: str) -> Optional[Alert]:
		rate = record.depletion_rate
		if rate is None:
			return None
		display = format_value(rate)
		if rate >= self.thresholds.critical_depletion:
			return Alert(
				type=AlertType.CRITICAL,
				category=AlertCategory.DEPLETION,
				title="🚨 Over-extraction Detected",
				message=f"Groundwater depletion rate at {display}% in {record.location}. Aquifer stress is severe.",
				value=rate,
				threshold=self.thresholds.critical_depletion,
				recommendation="Restrict bore-well usage. Implement mandatory rainwater harvesting.",
				timestamp=timestamp,
			)
		if rate >= self.thresholds.high_depletion:
			return Alert(
				type=AlertType.WARNING,
				category=AlertCategory.DEPLETION,
				title="⚠️ High Depletion Rate",
				message=f"Depletion rate {display}% in {record.location}. Extraction exceeds recharge.",
				value=rate,
				threshold=self.thresholds.high_depletion,
				recommendation="Promote water-efficient irrigation. Review extraction permits.",
				timestamp=timestamp,
			)
		return None

	def check_rainfall(self, record: WaterRecord, timestamp: str) -> Optional[Alert]:
		rainfall = record.rainfall
		if rainfall is None:
			return None
		display = format_value(rainfall)
		if rainfall <= self.thresholds.critical_rainfall:
			return Alert(
				type=AlertType.CRITICAL,
				category=AlertCategory.RAINFALL,
				title="🚨 Drought Risk",
				message=f"Rainfall only {display}mm in {record.location}. Severe drought conditions likely.",
				value=rainfall,
				threshold=self.thresholds.critical_rainfall,
				recommendation="Activate drought contingency plans. Arrange water tanker supply.",
				timestamp=timestamp,
			)
		if rainfall <= self.thresholds.low_rainfall:
			return Alert(
				type=AlertType.WARNING,
				category=AlertCategory.RAINFALL,
				title="⚠️ Below Normal Rainfall",
				message=f"Rainfall {display}mm in {record.location}, below expected levels.",
				value=rainfall,
				threshold=self.thresholds.low_rainfall,
				recommendation="Monitor reservoir levels. Advise farmers on drought-resistant crops.",
				timestamp=timestamp,
			)
		return None

	def check_ph(self, record: WaterRecord, timestamp: str) -> Optional[Alert]:
		ph = record.ph
		if ph is None:
			return None
		if ph >= self.thresholds.high_ph or ph <= self.thresholds.low_ph:
			return Alert(
				type=AlertType.WARNING,
				category=AlertCategory.WATER_QUALITY,
				title="⚠️ pH Imbalance",
				message=f"pH level {format_value(ph)} in {record.location}. Water quality may be affected.",
				value=ph,
				threshold=f"{self.thresholds.low_ph}-{self.thresholds.high_ph}",
				recommendation="Test for contaminants. Advise water treatment before consumption.",
				timestamp=timestamp,
			)
		return None

	def check_consumption(self, record: WaterRecord, timestamp: str) -> Optional[Alert]:
		consumption = record.total_consumption
		if consumption is None:
			return None
		if consumption >= self.thresholds.high_consumption:
			return Alert(
				type=AlertType.INFO,
				category=AlertCategory.CONSUMPTION,
				title="ℹ️ High Water Consumption",
				message=f"Total consumption {format_value(consumption)} Ml in {record.location}. Above district average.",
				value=consumption,
				threshold=self.thresholds.high_consumption,
				recommendation="Review industrial and agricultural water permits. Promote efficiency.",
				timestamp=timestamp,
			)
		return None

	def check_scarcity(self, record: WaterRecord, timestamp: str) -> Optional[Alert]:
		level = record.scarcity_level
		if level not in CRITICAL_SCARCITY_LEVELS:
			return None
		return Alert(
			type=AlertType.CRITICAL,
			category=AlertCategory.SCARCITY,
			title=f"🚨 {level.value} Water Scarcity",
			message=f"{record.location} classified as {level.value} water scarcity zone.",
			value=level.value,
			recommendation="Prioritize for government water supply augmentation schemes.",
			timestamp=timestamp,
		)
