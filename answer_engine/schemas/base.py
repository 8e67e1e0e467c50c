"""Shared base for request/response models exchanged as camelCase JSON."""
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_row(cls, row: SQLModel, **extra: Any):
        """Build from a table row, matching on snake_case field names."""
        return cls.model_validate({**row.model_dump(), **extra})
