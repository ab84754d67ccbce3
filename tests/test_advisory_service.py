"""
Unit tests for AdvisoryService.
"""
import pytest
from datetime import date
from unittest.mock import patch
from groundwater_api.exceptions import NotFoundError
from groundwater_api.schemas.gov_update import UpdatePriority
from groundwater_api.schemas.water_record import WaterRecord, ScarcityLevel
from groundwater_api.services.advisory_service import AdvisoryService


TODAY = date(2024, 1, 5)


def by_id(updates):
	return {u.id: u for u in updates}


class TestGenerateGovUpdates:
	"""Test cases for AdvisoryService.generate_gov_updates."""

	@pytest.mark.parametrize("level", list(ScarcityLevel) + [None])
	def test_always_five_updates(self, make_record, level):
		"""Test five updates with ids 1-5 for every scarcity level."""
		updates = AdvisoryService.generate_gov_updates(make_record(scarcity_level=level), TODAY)

		assert [u.id for u in updates] == [1, 2, 3, 4, 5]

	def test_five_updates_for_empty_record(self):
		updates = AdvisoryService.generate_gov_updates(WaterRecord(year=2023, location="Nashik"), TODAY)

		assert len(updates) == 5
		assert by_id(updates)[1].body == "Current groundwater level in Nashik stands at N/Am. Depletion rate: N/A%. Classification: N/A."

	def test_date_format(self, calm_record):
		"""Test dates use the day-first en-IN short format."""
		updates = AdvisoryService.generate_gov_updates(calm_record, TODAY)

		assert {u.date for u in updates} == {"5/1/2024"}

	def test_calm_record_is_normal_priority(self, calm_record):
		updates = AdvisoryService.generate_gov_updates(calm_record, TODAY)

		assert all(u.priority == UpdatePriority.NORMAL for u in updates)

	def test_status_report(self, make_record):
		update = by_id(AdvisoryService.generate_gov_updates(make_record(groundwater_level=14.0, depletion_rate=5.5, scarcity_level=ScarcityLevel.EXTREME), TODAY))[1]

		assert update.title == "Groundwater Status Report"
		assert update.source == "Central Ground Water Board"
		assert update.body == "Current groundwater level in Nashik stands at 14m. Depletion rate: 5.5%. Classification: Extreme."
		assert update.priority == UpdatePriority.HIGH

	def test_rainfall_below_normal(self, make_record):
		update = by_id(AdvisoryService.generate_gov_updates(make_record(rainfall=650.0), TODAY))[2]

		assert update.body == "Annual rainfall recorded: 650mm. Below normal levels. Drought alert issued."
		assert update.priority == UpdatePriority.HIGH

	def test_rainfall_at_700_is_normal(self, make_record):
		"""Test the rainfall update uses a strict comparison."""
		update = by_id(AdvisoryService.generate_gov_updates(make_record(rainfall=700.0), TODAY))[2]

		assert update.body == "Annual rainfall recorded: 700mm. Within normal range."
		assert update.priority == UpdatePriority.NORMAL

	@pytest.mark.parametrize("ph, acceptable", [(6.5, True), (8.0, True), (7.2, True), (6.4, False), (8.1, False), (None, False)])
	def test_water_quality(self, make_record, ph, acceptable):
		update = by_id(AdvisoryService.generate_gov_updates(make_record(ph=ph), TODAY))[3]

		if acceptable:
			assert update.body.endswith("Water quality is within acceptable BIS standards.")
		else:
			assert update.body.endswith("Water quality needs attention.")
		assert update.priority == UpdatePriority.NORMAL

	def test_usage_distribution(self, make_record):
		record = make_record(agricultural_usage=320.5, industrial_usage=110.0, household_usage=70.0, consumption=None)

		update = by_id(AdvisoryService.generate_gov_updates(record, TODAY))[4]

		assert update.body == "Agricultural: 320.5 Ml | Industrial: 110 Ml | Household: 70 Ml. Total consumption: 500.5 Ml."

	@patch('groundwater_api.services.advisory_service.settings')
	def test_usage_source_from_settings(self, mock_settings, calm_record):
		mock_settings.advisory_district_authority = "Pune District Water Authority"

		update = by_id(AdvisoryService.generate_gov_updates(calm_record, TODAY))[4]

		assert update.source == "Pune District Water Authority"

	@pytest.mark.parametrize("level, flagged", [
		(ScarcityLevel.HIGH, True),
		(ScarcityLevel.SEVERE, True),
		(ScarcityLevel.EXTREME, False),
		(ScarcityLevel.MODERATE, False),
	])
	def test_jal_shakti_advisory(self, make_record, level, flagged):
		"""Test the advisory flags High and Severe scarcity for intervention."""
		update = by_id(AdvisoryService.generate_gov_updates(make_record(scarcity_level=level), TODAY))[5]

		if flagged:
			assert "marked for priority intervention" in update.body
			assert update.priority == UpdatePriority.HIGH
		else:
			assert "under regular monitoring" in update.body
			assert update.priority == UpdatePriority.NORMAL


class TestGenerateGovUpdatesForSeries:
	"""Test cases for AdvisoryService.generate_gov_updates_for_series."""

	def test_empty_series(self):
		assert AdvisoryService.generate_gov_updates_for_series([], TODAY) == []

	def test_uses_latest_year(self, make_record):
		records = [make_record(year=2023, rainfall=650.0), make_record(year=2021, rainfall=900.0)]

		updates = AdvisoryService.generate_gov_updates_for_series(records, TODAY)

		assert "650mm" in by_id(updates)[2].body


class TestGetUpdatesForLocation:
	"""Test cases for AdvisoryService.get_updates_for_location."""

	def test_unknown_location(self, state):
		with pytest.raises(NotFoundError):
			AdvisoryService.get_updates_for_location("Atlantis")

	def test_stored_location(self, state, make_record):
		state.upsert_record(make_record(year=2022))
		state.upsert_record(make_record(year=2023, groundwater_level=13.0))

		updates = AdvisoryService.get_updates_for_location("Nashik")

		assert len(updates) == 5
		assert "stands at 13m" in by_id(updates)[1].body
