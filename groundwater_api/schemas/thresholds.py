from pydantic import ConfigDict
from groundwater_api.schemas.base import BaseSchema


class AlertThresholds(BaseSchema):
	"""
	Fixed alert thresholds. All numeric comparisons against these are inclusive.

	Instances are immutable; tests build alternates and inject them into AlertEvaluator.
	"""
	model_config = ConfigDict(frozen=True)

	critical_water_level: float = 15      # metres, critical depth
	warning_water_level: float = 12       # metres, warning depth
	high_depletion: float = 5             # percentage
	critical_depletion: float = 7         # percentage
	low_rainfall: float = 700             # mm
	critical_rainfall: float = 600        # mm
	high_ph: float = 8.0
	low_ph: float = 6.5
	high_consumption: float = 500         # Ml


ALERT_THRESHOLDS = AlertThresholds()
