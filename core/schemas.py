from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def utc_now() -> datetime:
    """
    Current instant, used to stamp response envelopes.

    Returns
    -------
    datetime
        Timezone-aware UTC datetime
    """
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """
    Base schema serialized with camelCase keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )


class ApiResponse(CamelModel, Generic[T]):
    """
    Envelope wrapping every response body.

    Attributes
    ----------
    status_code : int
        HTTP status code mirrored in the body
    message : str
        Human readable outcome
    data : T
        Payload (``None`` for most errors)
    timestamp : datetime
        Instant the envelope was built
    """
    status_code: int = 200
    message: str
    data: T
    timestamp: datetime = Field(default_factory=utc_now)
