"""
Composite 0-100 water health score.

The trend scanner depends only on the ScoreCalculator interface; WaterScoreCalculator
is the default implementation used by the API.
"""
from typing import Optional, Protocol
from groundwater_api.schemas.water_record import WaterRecord, ScarcityLevel
import logging

logger = logging.getLogger(__name__)


SCARCITY_PENALTY = {
	ScarcityLevel.LOW: 0,
	ScarcityLevel.MODERATE: 3,
	ScarcityLevel.HIGH: 6,
	ScarcityLevel.SEVERE: 8,
	ScarcityLevel.EXTREME: 10,
}

# Score bands used to colour scores in reports
GOOD_SCORE = 70
MODERATE_SCORE = 50


class ScoreCalculator(Protocol):
	"""Anything that turns one record into a 0-100 health score."""

	def calculate(self, record: WaterRecord) -> float:
		...


class WaterScoreCalculator:
	"""
	Penalty-based score: start at 100 and subtract a capped penalty per metric.
	Missing metrics contribute no penalty.
	"""

	# depth beyond this many metres is penalised
	BASELINE_DEPTH_M = 8.0
	# rainfall shortfall is measured against this annual total
	NORMAL_RAINFALL_MM = 900.0
	SAFE_PH_RANGE = (6.5, 8.0)

	def calculate(self, record: WaterRecord) -> float:
		"""
		Compute the composite score for a single record.

		Args:
			record: Yearly water record

		Returns:
			Score clamped to [0, 100], rounded to one decimal
		"""
		penalty = 0.0

		if record.groundwater_level is not None:
			penalty += min(35.0, max(0.0, record.groundwater_level - self.BASELINE_DEPTH_M) * 4)

		if record.depletion_rate is not None:
			penalty += min(25.0, max(0.0, record.depletion_rate) * 4)

		if record.rainfall is not None:
			penalty += min(20.0, max(0.0, self.NORMAL_RAINFALL_MM - record.rainfall) / 20)

		if record.ph is not None:
			low, high = self.SAFE_PH_RANGE
			distance = low - record.ph if record.ph < low else max(0.0, record.ph - high)
			penalty += min(10.0, distance * 10)

		if record.scarcity_level is not None:
			penalty += SCARCITY_PENALTY[record.scarcity_level]

		score = round(max(0.0, min(100.0, 100.0 - penalty)), 1)
		logger.debug(f"Water score for {record.location} {record.year}: {score}")
		return score


def score_band(score: Optional[float]) -> Optional[str]:
	"""
	Map a score to its report band: 'good' (>= 70), 'moderate' (>= 50) or 'poor'.
	Returns None when the score is unknown.
	"""
	if score is None:
		return None
	if score >= GOOD_SCORE:
		return "good"
	if score >= MODERATE_SCORE:
		return "moderate"
	return "poor"


default_score_calculator = WaterScoreCalculator()
