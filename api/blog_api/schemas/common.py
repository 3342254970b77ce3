"""Response envelope shared by every endpoint."""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict


def _as_utc(value: datetime) -> datetime:
    # SQLite hands stored timestamps back without tzinfo; they were written in UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]


class APIModel(BaseModel):
    """Base for schemas whose JSON keys are camelCase."""

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(APIModel):
    """Plain ``{success, message}`` envelope."""

    success: bool = True
    message: str
