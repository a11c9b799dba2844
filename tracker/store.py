# tracker/store.py
import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .db import SessionLocal
from .errors import ParcelNotFoundError
from .models import Parcel as ParcelRow
from .schemas import Parcel, ParcelStatus

logger = logging.getLogger(__name__)


def _to_parcel(row: ParcelRow) -> Parcel:
    return Parcel(
        number=row.number,
        client=row.client,
        status=row.status,
        address=row.address,
        created_at=row.created_at,
    )


class ParcelStore:
    """CRUD access to the ``parcel`` table.

    Every call opens its own session from ``session_factory`` (the configured
    ``SessionLocal`` by default), runs a single statement and closes the
    session again. Database errors are logged, rolled back and re-raised
    unchanged.
    """

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self._session_factory = session_factory

    def add(self, parcel: Parcel) -> int:
        db = self._session_factory()
        try:
            row = ParcelRow(
                client=parcel.client,
                status=ParcelStatus(parcel.status).value,
                address=parcel.address,
                created_at=parcel.created_at,
            )
            db.add(row)
            try:
                db.commit()
                db.refresh(row)
            except SQLAlchemyError:
                db.rollback()
                logger.error("insert failed client=%s", parcel.client)
                raise
            logger.debug("parcel added number=%s client=%s", row.number, row.client)
            return row.number
        finally:
            db.close()

    def get(self, number: int) -> Parcel:
        db = self._session_factory()
        try:
            try:
                row = db.query(ParcelRow).filter(ParcelRow.number == number).first()
            except SQLAlchemyError:
                logger.error("select failed number=%s", number)
                raise
            if row is None:
                raise ParcelNotFoundError(number)
            return _to_parcel(row)
        finally:
            db.close()

    def get_by_client(self, client: int) -> List[Parcel]:
        db = self._session_factory()
        try:
            try:
                rows = db.query(ParcelRow).filter(ParcelRow.client == client).all()
            except SQLAlchemyError:
                logger.error("select failed client=%s", client)
                raise
            return [_to_parcel(r) for r in rows]
        finally:
            db.close()

    def set_status(self, number: int, status: ParcelStatus) -> None:
        self._update(number, {ParcelRow.status: ParcelStatus(status).value})

    def set_address(self, number: int, address: str) -> None:
        self._update(number, {ParcelRow.address: address})

    def delete(self, number: int) -> None:
        db = self._session_factory()
        try:
            try:
                deleted = db.query(ParcelRow).filter(ParcelRow.number == number).delete()
                db.commit()
            except SQLAlchemyError:
                db.rollback()
                logger.error("delete failed number=%s", number)
                raise
            logger.debug("parcel deleted number=%s rows=%s", number, deleted)
        finally:
            db.close()

    def _update(self, number: int, values: dict) -> None:
        # missing numbers update zero rows and are not an error, same as delete
        db = self._session_factory()
        try:
            try:
                updated = (db.query(ParcelRow)
                           .filter(ParcelRow.number == number)
                           .update(values, synchronize_session=False))
                db.commit()
            except SQLAlchemyError:
                db.rollback()
                logger.error("update failed number=%s", number)
                raise
            logger.debug("parcel updated number=%s rows=%s", number, updated)
        finally:
            db.close()
