# tracker/main.py
import argparse
import logging
import sys

from .config import settings
from .db import init_db, make_engine, make_session_factory
from .errors import ParcelNotFoundError, ParcelStateError
from .service import ParcelService
from .store import ParcelStore
from .utils import format_parcel


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tracker", description="Track parcels in a local database")
    parser.add_argument("--database-url", default=None, help="SQLAlchemy URL (defaults to DATABASE_URL)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create the parcel table if missing")

    p = sub.add_parser("register", help="Register a new parcel")
    p.add_argument("client", type=int)
    p.add_argument("address")

    p = sub.add_parser("show", help="Show one parcel")
    p.add_argument("number", type=int)

    p = sub.add_parser("list", help="List parcels of a client")
    p.add_argument("client", type=int)

    p = sub.add_parser("next-status", help="Advance a parcel to its next status")
    p.add_argument("number", type=int)

    p = sub.add_parser("set-address", help="Change the address of a registered parcel")
    p.add_argument("number", type=int)
    p.add_argument("address")

    p = sub.add_parser("delete", help="Delete a registered parcel")
    p.add_argument("number", type=int)
    return parser


def run(args: argparse.Namespace, service: ParcelService) -> None:
    if args.command == "init-db":
        print("database ready")
    elif args.command == "register":
        print(format_parcel(service.register(args.client, args.address)))
    elif args.command == "show":
        print(format_parcel(service.get(args.number)))
    elif args.command == "list":
        for p in sorted(service.client_parcels(args.client), key=lambda p: p.number):
            print(format_parcel(p))
    elif args.command == "next-status":
        status = service.next_status(args.number)
        print(f"#{args.number} status={status.value}")
    elif args.command == "set-address":
        service.change_address(args.number, args.address)
        print(f"#{args.number} address={args.address!r}")
    elif args.command == "delete":
        service.delete(args.number)
        print(f"#{args.number} deleted")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    engine = make_engine(args.database_url or settings.DATABASE_URL, echo=settings.SQL_ECHO)
    try:
        init_db(engine)
        service = ParcelService(ParcelStore(make_session_factory(engine)))
        try:
            run(args, service)
        except (ParcelNotFoundError, ParcelStateError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        return 0
    finally:
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
