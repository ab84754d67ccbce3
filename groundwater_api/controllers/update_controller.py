from fastapi import APIRouter
from typing import List
from groundwater_api.exceptions import handle_service_exceptions
from groundwater_api.schemas.gov_update import GovUpdate
from groundwater_api.services.advisory_service import AdvisoryService

router = APIRouter(prefix="/updates", tags=["updates"])


@router.get("/{location}", response_model=List[GovUpdate])
@handle_service_exceptions
async def get_location_updates(location: str):
	"""
	Get the five status updates for a location's latest record.
	"""
	return AdvisoryService.get_updates_for_location(location)
