import pytest

from ednc import seed
from ednc.core.exceptions import DuplicateEmail
from ednc.db import Instructor
from tests.conftest import TestSessionLocal, make_instructor, sqlite_engine


@pytest.fixture
def seed_db(db_session, monkeypatch):
    monkeypatch.setattr(seed, "SessionLocal", TestSessionLocal)
    monkeypatch.setattr(seed, "engine", sqlite_engine)
    return db_session


def test_create_admin(db_session):
    admin = seed.create_admin(db_session, "Root", "root@example.com", "pw")

    assert admin.is_admin is True


def test_create_admin_refuses_existing_email(db_session, instructor):
    with pytest.raises(DuplicateEmail):
        seed.create_admin(db_session, "Root", instructor.email, "pw")


def test_cli_promote_and_revoke(seed_db):
    lecturer = make_instructor(seed_db)

    assert seed.main(["promote", "--email", lecturer.email]) == 0
    seed_db.refresh(lecturer)
    assert lecturer.is_admin is True

    assert seed.main(["promote", "--email", lecturer.email, "--revoke"]) == 0
    seed_db.refresh(lecturer)
    assert lecturer.is_admin is False


def test_cli_create_admin(seed_db):
    assert seed.main(["create-admin", "--name", "Root", "--email", "root@example.com", "--password", "pw"]) == 0

    assert seed_db.query(Instructor).filter_by(email="root@example.com").one().is_admin is True


def test_cli_promote_unknown_email(seed_db):
    assert seed.main(["promote", "--email", "ghost@example.com"]) == 1
