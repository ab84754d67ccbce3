"""
Unit tests for State.
"""
from groundwater_api.state import State


class TestState:
	"""Test cases for the in-memory record store."""

	def test_singleton(self, state):
		assert State() is state

	def test_records_sorted_by_year(self, state, make_record):
		state.load_records([make_record(year=2023), make_record(year=2019), make_record(year=2021)])

		assert [r.year for r in state.get_records("Nashik")] == [2019, 2021, 2023]
		assert state.get_latest_record("Nashik").year == 2023

	def test_upsert_replaces_same_year(self, state, make_record):
		assert state.upsert_record(make_record(year=2023, rainfall=800.0)) is False
		assert state.upsert_record(make_record(year=2023, rainfall=650.0)) is True

		records = state.get_records("Nashik")
		assert len(records) == 1
		assert records[0].rainfall == 650.0

	def test_unknown_location(self, state):
		assert state.get_records("Atlantis") == []
		assert state.get_latest_record("Atlantis") is None
		assert state.location_exists("Atlantis") is False

	def test_locations(self, state, make_record):
		state.load_records([make_record(location="Pune"), make_record(location="Nashik")])

		assert state.locations == ["Nashik", "Pune"]

	def test_returned_list_is_a_copy(self, state, make_record):
		state.upsert_record(make_record())

		state.get_records("Nashik").clear()

		assert len(state.get_records("Nashik")) == 1
