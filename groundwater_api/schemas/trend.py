from enum import Enum
from typing import List, Optional
from groundwater_api.schemas.base import BaseSchema


class TrendDirection(str, Enum):
	UP = "up"
	DOWN = "down"
	NEUTRAL = "neutral"


class TrendIndicator(BaseSchema):
	"""Year-over-year change of one metric between the two most recent records."""
	label: str
	metric: str
	unit: str
	current: float
	previous: float
	change_pct: float
	direction: TrendDirection
	# Whether the movement is favourable. Inverted for metrics where up is bad (depth, depletion).
	is_good: bool


class PeriodSummary(BaseSchema):
	"""First-to-last change across a location's monitoring period."""
	location: str
	record_count: int
	first_year: Optional[int] = None
	last_year: Optional[int] = None
	water_level_change: Optional[float] = None
	water_level_trend: Optional[str] = None
	rainfall_change: Optional[float] = None
	rainfall_trend: Optional[str] = None
	depletion_change: Optional[float] = None
	depletion_trend: Optional[str] = None
	latest_water_score: Optional[float] = None
	# good, moderate or poor
	latest_score_band: Optional[str] = None


class TrendReport(BaseSchema):
	location: str
	indicators: List[TrendIndicator] = []
	summary: PeriodSummary
