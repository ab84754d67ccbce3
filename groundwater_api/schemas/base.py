from typing import Any, Dict
import json
from pydantic import BaseModel, ConfigDict

class BaseSchema(BaseModel):
	"""
	Base schema class for every API model, with a plain-dict serialization helper.
	"""

	model_config = ConfigDict(arbitrary_types_allowed=True)

	def to_dict(self) -> Dict[str, Any]:
		"""Convert model to a JSON-compatible dictionary (enums as values, field names as keys)."""
		return json.loads(self.model_dump_json())
