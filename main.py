from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from groundwater_api.config import settings
from groundwater_api.controllers import alert_controller, location_controller, trend_controller, update_controller
from groundwater_api.logging_config import setup_logging
from groundwater_api.services.record_service import RecordService
from groundwater_api.state import state
import logging

# Setup structured JSON logging to stdout
setup_logging(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	if settings.has_water_data:
		RecordService.load_from_csv(settings.water_data_path)
	else:
		logger.info("WATER_DATA_PATH not set, starting with an empty record store")
	yield


app = FastAPI(
	title="Groundwater Alert API",
	description="Threshold alerts, trend detection and status updates for yearly groundwater records",
	version="1.0.0",
	lifespan=lifespan
)

app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_credentials=False,
	allow_methods=["*"],
	allow_headers=["*"],
)

# Include routers
app.include_router(location_controller.router)
app.include_router(alert_controller.router)
app.include_router(update_controller.router)
app.include_router(trend_controller.router)

@app.get("/")
async def root():
	return {
		"message": "Welcome to the Groundwater Alert API!",
		"endpoints": {
			"locations": "/locations",
			"alerts": "/alerts",
			"updates": "/updates",
			"trends": "/trends"
		}
	}

@app.get("/health")
async def health():
	"""Health check endpoint."""
	return {
		"status": "healthy",
		"locations": len(state.locations)
	}


if __name__ == "__main__":
	import uvicorn
	uvicorn.run("main:app", host=settings.api_host, port=settings.api_port)
