from fastapi import APIRouter
from groundwater_api.exceptions import handle_service_exceptions
from groundwater_api.schemas.trend import TrendReport
from groundwater_api.services.summary_service import SummaryService

router = APIRouter(prefix="/trends", tags=["trends"])


@router.get("/{location}", response_model=TrendReport)
@handle_service_exceptions
async def get_location_trends(location: str):
	"""
	Get year-over-year indicators and the monitoring-period summary for a location.
	"""
	return SummaryService.get_trend_report(location)
