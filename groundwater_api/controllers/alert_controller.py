from fastapi import APIRouter
from typing import List
from groundwater_api.exceptions import handle_service_exceptions
from groundwater_api.schemas.alert import Alert, EvaluationRequest
from groundwater_api.services.alert_service import AlertService

router = APIRouter(prefix="/alerts", tags=["alerts"])


@router.post("/evaluate", response_model=List[Alert])
@handle_service_exceptions
async def evaluate_record(request: EvaluationRequest):
	"""
	Evaluate a record without storing it.

	Trend alerts are included when the request carries a history of three or more records.
	"""
	return AlertService.generate_alerts(request.record, request.history)


@router.get("/{location}", response_model=List[Alert])
@handle_service_exceptions
async def get_location_alerts(location: str):
	"""
	Evaluate a location's latest stored record against its full stored history.
	"""
	return AlertService.get_alerts_for_location(location)
