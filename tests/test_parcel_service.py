import re
import unittest

from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from tracker.db import init_db, make_session_factory
from tracker.errors import ParcelNotFoundError, ParcelStateError
from tracker.schemas import ParcelStatus
from tracker.service import ParcelService
from tracker.store import ParcelStore

RFC3339_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")


class ParcelServiceTests(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine(
            "sqlite+pysqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        init_db(self.engine)
        self.store = ParcelStore(make_session_factory(self.engine))
        self.service = ParcelService(self.store)

    def tearDown(self):
        self.engine.dispose()

    def test_register(self):
        parcel = self.service.register(1000, "Pskov, Lenina 1")
        self.assertTrue(parcel.number)
        self.assertEqual(ParcelStatus.REGISTERED, parcel.status)
        self.assertRegex(parcel.created_at, RFC3339_UTC)

        stored = self.store.get(parcel.number)
        self.assertEqual(parcel.model_dump(), stored.model_dump())

    def test_get(self):
        parcel = self.service.register(3, "addr")
        self.assertEqual(parcel.model_dump(), self.service.get(parcel.number).model_dump())
        with self.assertRaises(ParcelNotFoundError):
            self.service.get(parcel.number + 1)

    def test_client_parcels(self):
        a = self.service.register(7, "first")
        b = self.service.register(7, "second")
        self.service.register(8, "other client")

        numbers = sorted(p.number for p in self.service.client_parcels(7))
        self.assertEqual(sorted([a.number, b.number]), numbers)

    def test_next_status_chain(self):
        number = self.service.register(1, "addr").number

        self.assertEqual(ParcelStatus.SENT, self.service.next_status(number))
        self.assertEqual(ParcelStatus.DELIVERED, self.service.next_status(number))
        # delivered is final
        self.assertEqual(ParcelStatus.DELIVERED, self.service.next_status(number))
        self.assertEqual(ParcelStatus.DELIVERED, self.store.get(number).status)

    def test_next_status_missing(self):
        with self.assertRaises(ParcelNotFoundError):
            self.service.next_status(12345)

    def test_change_address_while_registered(self):
        parcel = self.service.register(1, "old")
        self.service.change_address(parcel.number, "new")

        stored = self.store.get(parcel.number)
        self.assertEqual("new", stored.address)
        self.assertEqual(parcel.created_at, stored.created_at)

    def test_change_address_after_sent(self):
        number = self.service.register(1, "old").number
        self.service.next_status(number)

        with self.assertRaises(ParcelStateError) as ctx:
            self.service.change_address(number, "new")
        self.assertEqual(ParcelStatus.SENT, ctx.exception.status)
        self.assertEqual("old", self.store.get(number).address)

    def test_delete_while_registered(self):
        number = self.service.register(1, "addr").number
        self.service.delete(number)
        with self.assertRaises(ParcelNotFoundError):
            self.store.get(number)

    def test_delete_after_sent(self):
        number = self.service.register(1, "addr").number
        self.service.next_status(number)

        with self.assertRaises(ParcelStateError) as ctx:
            self.service.delete(number)
        self.assertEqual(number, ctx.exception.number)
        self.assertIn("status is sent", str(ctx.exception))
        self.assertEqual(number, self.store.get(number).number)

    def test_delete_missing(self):
        with self.assertRaises(ParcelNotFoundError):
            self.service.delete(12345)


if __name__ == "__main__":
    unittest.main()
