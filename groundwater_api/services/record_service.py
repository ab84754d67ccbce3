from typing import List
from groundwater_api.exceptions import NotFoundError, ValidationError
from groundwater_api.schemas.water_record import WaterRecord
from groundwater_api.state import state
from groundwater_api.utils.data_loader import load_records_from_csv
import logging

logger = logging.getLogger(__name__)


class RecordService:
	"""Service layer for stored yearly water records."""

	@staticmethod
	def get_locations() -> List[str]:
		return state.locations

	@staticmethod
	def get_records(location: str) -> List[WaterRecord]:
		"""
		Get a location's records sorted by year.

		Raises:
			NotFoundError: If no records exist for the location
		"""
		if not state.location_exists(location):
			raise NotFoundError("Location", location)
		return state.get_records(location)

	@staticmethod
	def upsert_record(location: str, record: WaterRecord) -> bool:
		"""
		Store a record for a location, replacing the same year if present.

		Args:
			location: Location from the request path
			record: Record whose location must match

		Returns:
			True if an existing record was replaced, False if it was new

		Raises:
			ValidationError: If the record belongs to another location
		"""
		if record.location != location:
			raise ValidationError(
				f"Record location '{record.location}' does not match '{location}'"
			)
		replaced = state.upsert_record(record)
		logger.info(f"{'Updated' if replaced else 'Created'} record for {location} {record.year}")
		return replaced

	@staticmethod
	def load_from_csv(path: str) -> int:
		"""
		Load a CSV of records into state.

		Returns:
			Number of records loaded
		"""
		logger.info(f"Loading water data from {path}")
		return state.load_records(load_records_from_csv(path))
