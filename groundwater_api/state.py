import logging
from typing import Dict, Iterable, List, Optional
from groundwater_api.schemas.water_record import WaterRecord
logger = logging.getLogger(__name__)

class State:
	"""
	Shared in-memory store of yearly water records, keyed by location then year.
	This acts as a singleton state object.

	Records are unique per (location, year); adding a record for an existing
	year replaces it. Reads always return new lists sorted by year.
	"""

	_instance: Optional['State'] = None

	def __new__(cls):
		if cls._instance is None:
			cls._instance = super(State, cls).__new__(cls)
			cls._instance._initialized = False
		return cls._instance

	def __init__(self):
		if self._initialized:
			return

		self._records: Dict[str, Dict[int, WaterRecord]] = {}
		self._initialized = True

	@property
	def locations(self) -> List[str]:
		"""
		Getter for known locations, alphabetical.
		Usage: locations = state.locations
		"""
		return sorted(self._records.keys())

	def location_exists(self, location: str) -> bool:
		return location in self._records

	def get_records(self, location: str) -> List[WaterRecord]:
		"""
		Get a location's records sorted by year ascending.

		Args:
			location: Location name

		Returns:
			Sorted list, empty if the location is unknown
		"""
		by_year = self._records.get(location, {})
		return [by_year[year] for year in sorted(by_year)]

	def get_latest_record(self, location: str) -> Optional[WaterRecord]:
		"""Get the most recent record for a location."""
		records = self.get_records(location)
		return records[-1] if records else None

	def upsert_record(self, record: WaterRecord) -> bool:
		"""
		Add a record, replacing any existing record for the same location and year.

		Args:
			record: WaterRecord object

		Returns:
			True if an existing record was replaced, False if it was new
		"""
		by_year = self._records.setdefault(record.location, {})
		replaced = record.year in by_year
		by_year[record.year] = record
		if replaced:
			logger.info(f"Replaced record for {record.location} {record.year}")
		return replaced

	def load_records(self, records: Iterable[WaterRecord]) -> int:
		"""
		Bulk upsert records.

		Returns:
			Number of records processed
		"""
		count = 0
		for record in records:
			self.upsert_record(record)
			count += 1
		logger.info(f"Loaded {count} records, {len(self._records)} locations in state")
		return count

	def clear(self):
		"""Remove every record."""
		self._records.clear()

# Global state instance
state = State()
