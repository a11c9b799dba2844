# tracker/schemas.py
from enum import Enum

from pydantic import BaseModel


class ParcelStatus(str, Enum):
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"


class Parcel(BaseModel):
    """A shipment record as handed to and returned by the store.

    ``number`` stays 0 until the parcel has been added.
    """

    number: int = 0
    client: int
    status: ParcelStatus
    address: str
    created_at: str
