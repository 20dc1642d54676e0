"""
Test configuration and fixtures
"""
import os
from datetime import date, timedelta
from typing import Generator

import pytest
from faker import Faker
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Set testing environment before the app reads its settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["OWNER_ONLY_COURSE_UPDATE"] = "false"

from ednc.main import app
from ednc.api.deps import get_db
from ednc.core.security import create_instructor_token, get_password_hash
from ednc.db import Base, Course, Instructor, Student
from ednc.db.session import enable_sqlite_foreign_keys

fake = Faker()

sqlite_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(sqlite_engine)
TestSessionLocal = sessionmaker(bind=sqlite_engine, autocommit=False, autoflush=False)

TODAY = date.today()


def days(n: int) -> date:
    return TODAY + timedelta(days=n)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Fresh schema for every test"""
    Base.metadata.create_all(bind=sqlite_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=sqlite_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def make_instructor(db: Session, name: str | None = None, is_admin: bool = False,
                    password: str = "testpassword123") -> Instructor:
    instructor = Instructor(
        name=name or fake.name(),
        email=fake.unique.email(),
        hashed_password=get_password_hash(password),
        is_admin=is_admin,
    )
    db.add(instructor)
    db.commit()
    db.refresh(instructor)
    return instructor


def make_course(db: Session, instructor: Instructor, name: str = "Python Basics",
                schedule: str | None = None, start_date: date | None = None,
                end_date: date | None = None) -> Course:
    if schedule is None and start_date is None:
        schedule = "Mon/Wed 19:00-21:00"
    course = Course(
        name=name,
        schedule=schedule,
        start_date=start_date,
        end_date=end_date,
        instructor_id=instructor.id,
    )
    db.add(course)
    db.commit()
    db.refresh(course)
    return course


def make_student(db: Session, course: Course, email: str | None = None) -> Student:
    student = Student(
        name=fake.name(),
        english_name=fake.name(),
        email=email or fake.unique.email(),
        affiliation=fake.company(),
        phone=fake.phone_number(),
        birth_date="1995-03-14",
        course_id=course.id,
    )
    db.add(student)
    db.commit()
    db.refresh(student)
    return student


def auth_headers_for(instructor: Instructor) -> dict:
    return {"Authorization": f"Bearer {create_instructor_token(instructor)}"}


@pytest.fixture
def instructor(db_session: Session) -> Instructor:
    return make_instructor(db_session)


@pytest.fixture
def other_instructor(db_session: Session) -> Instructor:
    return make_instructor(db_session)


@pytest.fixture
def admin(db_session: Session) -> Instructor:
    return make_instructor(db_session, is_admin=True)


@pytest.fixture
def auth_headers(instructor: Instructor) -> dict:
    return auth_headers_for(instructor)


@pytest.fixture
def other_auth_headers(other_instructor: Instructor) -> dict:
    return auth_headers_for(other_instructor)


@pytest.fixture
def admin_auth_headers(admin: Instructor) -> dict:
    return auth_headers_for(admin)


@pytest.fixture
def student_payload() -> dict:
    return {
        "name": "Kim Minji",
        "english_name": "Minji Kim",
        "email": "minji@example.com",
        "affiliation": "ED&C Lab",
        "phone": "010-1234-5678",
        "birth_date": "1998-04-02",
    }
