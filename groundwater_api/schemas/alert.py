from enum import Enum
from typing import List, Optional, Union
from pydantic import Field
from groundwater_api.schemas.base import BaseSchema
from groundwater_api.schemas.water_record import WaterRecord


class AlertType(str, Enum):
	"""Severity tier, used by consumers for styling and prioritization."""
	CRITICAL = "critical"
	WARNING = "warning"
	INFO = "info"


class AlertCategory(str, Enum):
	WATER_LEVEL = "Water Level"
	DEPLETION = "Depletion"
	RAINFALL = "Rainfall"
	WATER_QUALITY = "Water Quality"
	CONSUMPTION = "Consumption"
	SCARCITY = "Scarcity"
	TREND = "Trend"


class Alert(BaseSchema):
	type: AlertType
	category: AlertCategory
	title: str
	message: str
	recommendation: str
	# Triggering metric value, scarcity level name, or streak length for trend alerts.
	value: Union[int, float, str]
	# Crossed threshold, a "low-high" range string for pH, absent for categorical and trend alerts.
	threshold: Optional[Union[float, str]] = None
	# ISO-8601 generation time, shared by every alert of one evaluation.
	timestamp: str


class EvaluationRequest(BaseSchema):
	"""Body of a stateless evaluation: current record plus optional unordered history."""
	record: WaterRecord = Field(description="Current year's record for the location")
	history: Optional[List[WaterRecord]] = Field(default=None, description="Full yearly history for the same location, any order")
