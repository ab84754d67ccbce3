"""
Unit tests for WaterScoreCalculator and score_band.
"""
import pytest
from groundwater_api.schemas.water_record import WaterRecord, ScarcityLevel
from groundwater_api.services.water_score_service import WaterScoreCalculator, score_band


class TestWaterScoreCalculator:
	"""Test cases for WaterScoreCalculator.calculate."""

	def test_ideal_record_scores_100(self, make_record):
		record = make_record(groundwater_level=6.0, depletion_rate=0.0, rainfall=1000.0, ph=7.0, scarcity_level=ScarcityLevel.LOW)

		assert WaterScoreCalculator().calculate(record) == 100.0

	def test_empty_record_scores_100(self):
		"""Test missing metrics add no penalty."""
		assert WaterScoreCalculator().calculate(WaterRecord(year=2023, location="Nashik")) == 100.0

	def test_penalties_add_up(self, make_record):
		# depth 2m over baseline: 8, depletion 2%: 8, rainfall 100mm short: 5, pH 0.5 over: 5, High: 6
		record = make_record(groundwater_level=10.0, depletion_rate=2.0, rainfall=800.0, ph=8.5, scarcity_level=ScarcityLevel.HIGH)

		assert WaterScoreCalculator().calculate(record) == 68.0

	def test_clamped_at_zero(self, make_record):
		record = make_record(groundwater_level=40.0, depletion_rate=20.0, rainfall=0.0, ph=2.0, scarcity_level=ScarcityLevel.EXTREME)

		assert WaterScoreCalculator().calculate(record) == 0.0

	def test_worse_depth_lowers_score(self, make_record):
		calculator = WaterScoreCalculator()

		assert calculator.calculate(make_record(groundwater_level=14.0)) < calculator.calculate(make_record(groundwater_level=10.0))


class TestScoreBand:
	"""Test cases for score_band."""

	@pytest.mark.parametrize("score, band", [(70, "good"), (95.5, "good"), (50, "moderate"), (69.9, "moderate"), (49.9, "poor"), (0, "poor")])
	def test_bands(self, score, band):
		assert score_band(score) == band

	def test_unknown_score(self):
		assert score_band(None) is None
