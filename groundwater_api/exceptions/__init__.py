from groundwater_api.exceptions.base import GroundwaterAPIException, NotFoundError, ValidationError, ServiceError
from groundwater_api.exceptions.handler import handle_service_exceptions

__all__ = [
	"GroundwaterAPIException",
	"NotFoundError",
	"ValidationError",
	"ServiceError",
	"handle_service_exceptions"
]
