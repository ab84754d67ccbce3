from enum import Enum
from typing import Optional
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from groundwater_api.schemas.base import BaseSchema


class ScarcityLevel(str, Enum):
	"""Water stress classification for a location, supplied upstream."""
	LOW = "Low"
	MODERATE = "Moderate"
	HIGH = "High"
	SEVERE = "Severe"
	EXTREME = "Extreme"


class WaterRecord(BaseSchema):
	"""
	One year of groundwater metrics for one location.

	Every metric is optional: a missing value never triggers an alert.
	Accepts both snake_case and the dashboard's camelCase keys (e.g. groundwaterLevel).
	"""
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

	year: int
	location: str
	# Metres of depth below reference, higher is worse.
	groundwater_level: Optional[float] = None
	# Percentage by which extraction exceeds natural recharge.
	depletion_rate: Optional[float] = None
	# Annual total, mm.
	rainfall: Optional[float] = None
	ph: Optional[float] = None
	# Usage in megaliters.
	agricultural_usage: Optional[float] = None
	industrial_usage: Optional[float] = None
	household_usage: Optional[float] = None
	consumption: Optional[float] = None
	scarcity_level: Optional[ScarcityLevel] = None
	# Composite 0-100 health score as computed upstream, informational only.
	water_score: Optional[float] = None

	@property
	def total_consumption(self) -> Optional[float]:
		"""
		Total usage in megaliters.

		Returns the explicit consumption when present, otherwise the sum of the
		usage fields that are present, or None when nothing is known.
		"""
		if self.consumption is not None:
			return self.consumption
		usages = [u for u in (self.agricultural_usage, self.industrial_usage, self.household_usage) if u is not None]
		if not usages:
			return None
		return sum(usages)
