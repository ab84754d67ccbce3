from groundwater_api.schemas.water_record import WaterRecord, ScarcityLevel
from groundwater_api.schemas.alert import Alert, AlertType, AlertCategory, EvaluationRequest
from groundwater_api.schemas.thresholds import AlertThresholds, ALERT_THRESHOLDS
from groundwater_api.schemas.gov_update import GovUpdate, UpdatePriority
from groundwater_api.schemas.trend import TrendIndicator, TrendDirection, PeriodSummary, TrendReport

__all__ = [
	"WaterRecord",
	"ScarcityLevel",
	"Alert",
	"AlertType",
	"AlertCategory",
	"EvaluationRequest",
	"AlertThresholds",
	"ALERT_THRESHOLDS",
	"GovUpdate",
	"UpdatePriority",
	"TrendIndicator",
	"TrendDirection",
	"PeriodSummary",
	"TrendReport",
]
