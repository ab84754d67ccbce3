"""
Loading yearly water records from CSV files and DataFrames.
"""
from typing import Any, Dict, List
import logging
import pandas as pd
from pydantic import ValidationError as PydanticValidationError
from groundwater_api.exceptions import ServiceError, ValidationError
from groundwater_api.schemas.water_record import WaterRecord, ScarcityLevel

logger = logging.getLogger(__name__)


# Dashboard (camelCase) headers mapped to record field names
COLUMN_ALIASES = {
	"groundwaterLevel": "groundwater_level",
	"depletionRate": "depletion_rate",
	"agriculturalUsage": "agricultural_usage",
	"industrialUsage": "industrial_usage",
	"householdUsage": "household_usage",
	"scarcityLevel": "scarcity_level",
	"waterScore": "water_score",
}

REQUIRED_COLUMNS = ["year", "location"]

NUMERIC_COLUMNS = [
	"groundwater_level",
	"depletion_rate",
	"rainfall",
	"ph",
	"agricultural_usage",
	"industrial_usage",
	"household_usage",
	"consumption",
	"water_score",
]

SCARCITY_VALUES = {level.value.lower(): level for level in ScarcityLevel}


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
	"""Strip headers and rename camelCase headers to record field names."""
	df = df.rename(columns=lambda c: str(c).strip())
	return df.rename(columns=COLUMN_ALIASES)


def parse_scarcity(value: Any):
	"""Case-insensitive scarcity lookup; unknown labels become None."""
	if value is None:
		return None
	level = SCARCITY_VALUES.get(str(value).strip().lower())
	if level is None:
		logger.warning(f"Unknown scarcity level '{value}', ignoring")
	return level


def records_from_dataframe(df: pd.DataFrame) -> List[WaterRecord]:
	"""
	Convert a DataFrame of yearly metrics into WaterRecords.

	Numeric columns are coerced (unparseable cells become missing values),
	rows without a year or location are dropped with a warning.

	Args:
		df: One row per location per year

	Returns:
		List of WaterRecord objects, in file order

	Raises:
		ValidationError: If a required column is missing
	"""
	df = normalize_columns(df)
	missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
	if missing:
		raise ValidationError(f"Water data is missing required columns: {', '.join(missing)}")

	df = df.copy()
	df["year"] = pd.to_numeric(df["year"], errors="coerce")
	for column in NUMERIC_COLUMNS:
		if column in df.columns:
			df[column] = pd.to_numeric(df[column], errors="coerce")

	invalid = df["year"].isna() | df["location"].isna()
	if invalid.any():
		logger.warning(f"Dropping {int(invalid.sum())} rows without year or location")
		df = df[~invalid]

	known_columns = REQUIRED_COLUMNS + NUMERIC_COLUMNS + ["scarcity_level"]
	df = df[[c for c in known_columns if c in df.columns]]
	# NaN -> None so absent metrics stay absent on the records
	df = df.astype(object).where(pd.notna(df), None)

	records = []
	for row in df.to_dict("records"):
		data: Dict[str, Any] = {k: v for k, v in row.items() if v is not None}
		data["year"] = int(data["year"])
		data["location"] = str(data["location"]).strip()
		if "scarcity_level" in data:
			data["scarcity_level"] = parse_scarcity(data["scarcity_level"])
		try:
			records.append(WaterRecord.model_validate(data))
		except PydanticValidationError as e:
			logger.warning(f"Skipping invalid row for {data.get('location')} {data.get('year')}: {e}")
	return records


def load_records_from_csv(path: str) -> List[WaterRecord]:
	"""
	Read a CSV of yearly water records.

	Args:
		path: CSV file path

	Returns:
		List of WaterRecord objects

	Raises:
		ServiceError: If the file cannot be read
		ValidationError: If a required column is missing
	"""
	try:
		df = pd.read_csv(path)
	except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
		logger.error(f"Failed to read water data from {path}: {str(e)}")
		raise ServiceError(f"Could not read water data from {path}: {str(e)}")

	records = records_from_dataframe(df)
	logger.info(f"Read {len(records)} records from {path}")
	return records
