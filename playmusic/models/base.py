"""Base model for records kept in the JSON data files."""

from pydantic import BaseModel
from typing import Any, Self


class StoredRecord(BaseModel):
    """A record loaded from or written to a data file."""

    @classmethod
    def from_stored(cls, item: dict[str, Any]) -> Self:
        """Build a record without validation, for entries that fail the schema.

        Declared fields missing from ``item`` are left unset (value ``None``) and
        values of the wrong type are kept as they are, so the entry is written back
        the way it was read.
        """
        values: dict[str, Any] = {}
        fields_set: set[str] = set()
        for name, field in cls.model_fields.items():
            key = field.alias or name
            values[name] = item.get(key)
            if key in item:
                fields_set.add(name)

        declared = {field.alias or name for name, field in cls.model_fields.items()}
        if cls.model_config.get("extra") == "allow":
            values.update({key: value for key, value in item.items() if key not in declared})
        return cls.model_construct(_fields_set=fields_set, **values)
