"""Pydantic models for DigitalOcean domain record resources."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _str_or_empty(value: Any) -> str:
    return value if isinstance(value, str) else ""


# Error envelope fields decode independently; a null or mistyped field renders empty
LenientStr = Annotated[str, BeforeValidator(_str_or_empty)]


class TxtRecordRequest(BaseModel):
    """Request body for creating a TXT record at the zone apex."""

    type: Literal["TXT"] = "TXT"
    name: str = "@"
    data: str


class DomainRecord(BaseModel):
    """A domain record as returned by the DigitalOcean API."""

    model_config = ConfigDict(extra="ignore")

    id: int
    type: str | None = None
    name: str | None = None
    data: str | None = None
    ttl: int | None = None


class DomainRecordResponse(BaseModel):
    """Response body for a successful record creation."""

    model_config = ConfigDict(extra="ignore")

    domain_record: DomainRecord


class ApiErrorBody(BaseModel):
    """Error envelope returned by the DigitalOcean API on failure."""

    model_config = ConfigDict(extra="ignore")

    id: LenientStr = ""
    message: LenientStr = ""
