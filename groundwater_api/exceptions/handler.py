from functools import wraps
from fastapi import HTTPException, status
from groundwater_api.exceptions.base import GroundwaterAPIException
import logging

logger = logging.getLogger(__name__)

def handle_service_exceptions(func):
	"""
	Decorator to handle service layer exceptions uniformly.
	Converts GroundwaterAPIException to HTTPException with appropriate status codes.

	Usage:
		@handle_service_exceptions
		async def my_endpoint():
			result = AlertService.get_alerts_for_location("Nashik")
			return result
	"""
	@wraps(func)
	async def wrapper(*args, **kwargs):
		try:
			return await func(*args, **kwargs)
		except GroundwaterAPIException as e:
			raise HTTPException(
				status_code=e.status_code,
				detail=e.detail
			)
		except HTTPException:
			raise
		except Exception as e:
			logger.exception(f"Unhandled error in {func.__name__}")
			raise HTTPException(
				status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
				detail=f"Internal server error: {str(e)}"
			)
	return wrapper
