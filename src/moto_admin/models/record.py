"""
Base for every API record. Unknown fields are kept so detail views can show them.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

RecordId = Union[int, str]


class Record(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Optional[RecordId] = None

    def get(self, key: str, default: Any = None) -> Any:
        """Field lookup by name, including extra fields."""
        if key in type(self).model_fields:
            return getattr(self, key)
        return (self.model_extra or {}).get(key, default)
