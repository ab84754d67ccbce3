"""
Unit tests for TrendIndicatorService.
"""
import pytest
from groundwater_api.schemas.trend import TrendDirection
from groundwater_api.services.trend_indicator_service import TrendIndicatorService


def by_metric(indicators):
	return {i.metric: i for i in indicators}


class TestPercentChange:
	"""Test cases for TrendIndicatorService.percent_change."""

	def test_increase(self):
		assert TrendIndicatorService.percent_change(110.0, 100.0) == pytest.approx(10.0)

	def test_negative_previous_uses_absolute_value(self):
		assert TrendIndicatorService.percent_change(-5.0, -10.0) == pytest.approx(50.0)

	def test_zero_previous(self):
		assert TrendIndicatorService.percent_change(5.0, 0.0) is None

	def test_missing_values(self):
		assert TrendIndicatorService.percent_change(None, 5.0) is None
		assert TrendIndicatorService.percent_change(5.0, None) is None


class TestGetIndicators:
	"""Test cases for TrendIndicatorService.get_indicators."""

	def test_needs_two_records(self, make_record):
		assert TrendIndicatorService.get_indicators([make_record()]) == []
		assert TrendIndicatorService.get_indicators([]) == []

	def test_compares_latest_two_years(self, make_record):
		records = [
			make_record(year=2023, groundwater_level=11.0, rainfall=800.0),
			make_record(year=2021, groundwater_level=5.0, rainfall=1200.0),
			make_record(year=2022, groundwater_level=10.0, rainfall=1000.0),
		]

		indicators = by_metric(TrendIndicatorService.get_indicators(records))

		level = indicators["groundwater_level"]
		assert level.previous == 10.0
		assert level.current == 11.0
		assert level.change_pct == 10.0
		assert level.direction == TrendDirection.UP
		# deeper water table is bad
		assert level.is_good is False

		rainfall = indicators["rainfall"]
		assert rainfall.change_pct == -20.0
		assert rainfall.direction == TrendDirection.DOWN
		assert rainfall.is_good is False

	def test_neutral_below_one_percent(self, make_record):
		records = [make_record(year=2022, ph=7.0), make_record(year=2023, ph=7.05)]

		ph = by_metric(TrendIndicatorService.get_indicators(records))["ph"]

		assert ph.direction == TrendDirection.NEUTRAL

	def test_falling_depletion_is_good(self, make_record):
		records = [make_record(year=2022, depletion_rate=5.0), make_record(year=2023, depletion_rate=4.0)]

		depletion = by_metric(TrendIndicatorService.get_indicators(records))["depletion_rate"]

		assert depletion.direction == TrendDirection.DOWN
		assert depletion.is_good is True

	def test_skips_zero_and_missing_previous(self, make_record):
		records = [
			make_record(year=2022, depletion_rate=0.0, ph=None),
			make_record(year=2023, depletion_rate=3.0, ph=7.0),
		]

		indicators = by_metric(TrendIndicatorService.get_indicators(records))

		assert set(indicators) == {"groundwater_level", "rainfall"}
