# tracker/errors.py
from .schemas import ParcelStatus


class ParcelNotFoundError(LookupError):
    def __init__(self, number: int):
        super().__init__(f"parcel {number} not found")
        self.number = number


class ParcelStateError(Exception):
    """Raised when a parcel's current status forbids the requested change."""

    def __init__(self, number: int, status: ParcelStatus, action: str):
        status = ParcelStatus(status)
        super().__init__(f"cannot {action} parcel {number}: status is {status.value}")
        self.number = number
        self.status = status
        self.action = action
