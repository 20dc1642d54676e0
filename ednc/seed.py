"""
Admin provisioning.

Admins cannot be created through the API. Use this command against the
configured database instead:

    python -m ednc.seed create-admin --name "Kim Admin" --email admin@ednc.kr --password secret
    python -m ednc.seed promote --email lecturer@ednc.kr
    python -m ednc.seed promote --email lecturer@ednc.kr --revoke
"""
import argparse
import logging
import sys

from ednc.core.exceptions import RosterError
from ednc.core.logging_config import setup_logging
from ednc.crud import instructor as crud_instructor
from ednc.db import Base
from ednc.db.session import SessionLocal, engine
from ednc.schemas.instructor import InstructorCreate

logger = logging.getLogger(__name__)


def create_admin(db, name: str, email: str, password: str):
    data = InstructorCreate(name=name, email=email, password=password)
    return crud_instructor.create_instructor(db, data, is_admin=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ednc.seed", description="Manage admin instructors")
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create-admin", help="create a new admin account")
    create.add_argument("--name", required=True)
    create.add_argument("--email", required=True)
    create.add_argument("--password", required=True)

    promote = sub.add_parser("promote", help="grant or revoke admin on an existing account")
    promote.add_argument("--email", required=True)
    promote.add_argument("--revoke", action="store_true")
    return parser


def main(argv=None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        if args.command == "create-admin":
            instructor = create_admin(db, args.name, args.email, args.password)
        else:
            instructor = crud_instructor.set_admin(db, args.email, is_admin=not args.revoke)
    except RosterError as e:
        logger.error(f"❌ {e.message}")
        return 1
    finally:
        db.close()

    print(f"{instructor.email}: is_admin={instructor.is_admin}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
