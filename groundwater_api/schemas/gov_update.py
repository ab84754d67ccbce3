from enum import Enum
from groundwater_api.schemas.base import BaseSchema


class UpdatePriority(str, Enum):
	HIGH = "high"
	NORMAL = "normal"


class GovUpdate(BaseSchema):
	"""Government-style status update derived from the latest record."""
	# Stable per topic, 1-5.
	id: int
	title: str
	body: str
	# en-IN short date, D/M/YYYY.
	date: str
	source: str
	priority: UpdatePriority = UpdatePriority.NORMAL
