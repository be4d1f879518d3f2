"""Shared schema building blocks — camelCase config and UTC date-time types."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

from certtrack.core.dates import as_utc, normalize_datetime


class CamelModel(BaseModel):
    """Accepts camelCase or snake_case keys, serializes camelCase."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


# Input: raw string/date/datetime -> aware UTC datetime (or None)
NormalizedDateTime = Annotated[datetime | None, BeforeValidator(normalize_datetime)]

# Output: DB values (naive on SQLite) -> aware UTC datetime
UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]
