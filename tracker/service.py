# tracker/service.py
import logging
from typing import List

from .errors import ParcelStateError
from .schemas import Parcel, ParcelStatus
from .store import ParcelStore
from .utils import now_rfc3339

logger = logging.getLogger(__name__)

NEXT_STATUS = {
    ParcelStatus.REGISTERED: ParcelStatus.SENT,
    ParcelStatus.SENT: ParcelStatus.DELIVERED,
}


class ParcelService:
    def __init__(self, store: ParcelStore):
        self.store = store

    def register(self, client: int, address: str) -> Parcel:
        parcel = Parcel(
            client=client,
            status=ParcelStatus.REGISTERED,
            address=address,
            created_at=now_rfc3339(),
        )
        parcel.number = self.store.add(parcel)
        logger.info("parcel %s for client %s registered to %r at %s",
                    parcel.number, client, address, parcel.created_at)
        return parcel

    def get(self, number: int) -> Parcel:
        return self.store.get(number)

    def client_parcels(self, client: int) -> List[Parcel]:
        return self.store.get_by_client(client)

    def next_status(self, number: int) -> ParcelStatus:
        """Move a parcel one step along registered -> sent -> delivered.

        Delivered parcels are left untouched.
        """
        parcel = self.store.get(number)
        nxt = NEXT_STATUS.get(parcel.status)
        if nxt is None:
            return parcel.status
        self.store.set_status(number, nxt)
        logger.info("parcel %s status %s -> %s", number, parcel.status.value, nxt.value)
        return nxt

    def change_address(self, number: int, address: str) -> None:
        parcel = self.store.get(number)
        if parcel.status != ParcelStatus.REGISTERED:
            raise ParcelStateError(number, parcel.status, "change address of")
        self.store.set_address(number, address)

    def delete(self, number: int) -> None:
        parcel = self.store.get(number)
        if parcel.status != ParcelStatus.REGISTERED:
            raise ParcelStateError(number, parcel.status, "delete")
        self.store.delete(number)
