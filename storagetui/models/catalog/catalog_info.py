"""Catalog records returned by providers."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SubscriptionInfo(BaseModel):
    """A subscription as listed by the provider."""

    id: str
    name: str


class AccountInfo(BaseModel):
    """A storage account within a subscription."""

    name: str
    region: str = ""


class ContainerInfo(BaseModel):
    """A blob container within an account."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    public_access: str = Field(default="", alias="publicAccess")


class BlobInfo(BaseModel):
    """A blob within a container.

    ``modified`` is None when the provider does not know the timestamp.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    size_bytes: int = Field(default=0, ge=0, alias="sizeBytes")
    modified: datetime | None = None
    content_type: str = Field(default="", alias="contentType")
