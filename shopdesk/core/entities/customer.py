"""Customer domain entity."""

from datetime import datetime

from pydantic import BaseModel, Field


class Customer(BaseModel):
    """A shop customer that orders are billed and shipped to."""

    id: str | None = None
    name: str
    email: str = ""
    phone: str = ""
    address: str = ""
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
