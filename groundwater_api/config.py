import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Settings:
	# Logging configuration
	log_level: str = os.getenv("LOG_LEVEL", "INFO")

	# API server configuration
	api_host: str = os.getenv("API_HOST", "0.0.0.0")
	api_port: int = int(os.getenv("API_PORT", "8000"))

	# Yearly water records loaded into state at startup (CSV). Empty means start with no data.
	water_data_path: Optional[str] = os.getenv("WATER_DATA_PATH") or None

	# Issuing authority shown on the usage distribution update
	advisory_district_authority: str = os.getenv("ADVISORY_DISTRICT_AUTHORITY", "Nashik District Water Authority")

	@property
	def has_water_data(self) -> bool:
		return self.water_data_path is not None

settings = Settings()
