from fastapi import APIRouter, status, Response
from typing import List
from groundwater_api.exceptions import handle_service_exceptions
from groundwater_api.schemas.water_record import WaterRecord
from groundwater_api.services.record_service import RecordService

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("/", response_model=List[str])
@handle_service_exceptions
async def get_locations():
	"""
	Get every location that has at least one stored record.
	"""
	return RecordService.get_locations()


@router.get("/{location}/records", response_model=List[WaterRecord])
@handle_service_exceptions
async def get_records(location: str):
	"""
	Get a location's yearly records, oldest first.
	"""
	return RecordService.get_records(location)


@router.post("/{location}/records", response_model=WaterRecord)
@handle_service_exceptions
async def upsert_record(location: str, record: WaterRecord, response: Response):
	"""
	Store one yearly record. An existing record for the same year is replaced.

	Returns:
		The stored record, 201 when the year is new and 200 when it was replaced
	"""
	replaced = RecordService.upsert_record(location, record)
	response.status_code = status.HTTP_200_OK if replaced else status.HTTP_201_CREATED
	return record
