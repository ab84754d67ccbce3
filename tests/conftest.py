"""
Pytest configuration and fixtures.
"""
import pytest
from groundwater_api.schemas.water_record import WaterRecord, ScarcityLevel
from groundwater_api.state import state as shared_state


def build_record(**overrides) -> WaterRecord:
	"""Record that triggers no threshold alert unless overridden."""
	data = {
		"year": 2023,
		"location": "Nashik",
		"groundwater_level": 8.0,
		"depletion_rate": 2.0,
		"rainfall": 900.0,
		"ph": 7.0,
		"agricultural_usage": 200.0,
		"industrial_usage": 60.0,
		"household_usage": 40.0,
		"consumption": 300.0,
		"scarcity_level": ScarcityLevel.LOW,
	}
	data.update(overrides)
	return WaterRecord(**data)


def build_history(location: str = "Nashik", start_year: int = 2019, **series) -> list:
	"""
	Build one record per year from per-field value lists.

	Example: build_history(groundwater_level=[10, 11, 12]) -> 3 records, 2019-2021
	"""
	length = len(next(iter(series.values())))
	return [
		build_record(year=start_year + i, location=location, **{field: values[i] for field, values in series.items()})
		for i in range(length)
	]


class StubScoreCalculator:
	"""Returns preset scores in call order and records what it was asked to score."""

	def __init__(self, scores):
		self.scores = list(scores)
		self.calls = []

	def calculate(self, record: WaterRecord) -> float:
		self.calls.append(record.year)
		return self.scores[len(self.calls) - 1]


@pytest.fixture
def calm_record():
	"""Record below every threshold."""
	return build_record()


@pytest.fixture
def make_record():
	return build_record


@pytest.fixture
def make_history():
	return build_history


@pytest.fixture
def state():
	"""Shared state, emptied before and after the test."""
	shared_state.clear()
	yield shared_state
	shared_state.clear()
