# ednc/crud/instructor.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ednc.core.exceptions import DuplicateEmail, NotFound, Unauthorized
from ednc.core.security import get_password_hash, verify_password
from ednc.db.models.instructor import Instructor
from ednc.db.session import commit_or_fail

logger = logging.getLogger(__name__)


def get_instructor_by_email(db: Session, email: str):
    # matched as stored, emails are not case-normalized
    return db.query(Instructor).filter(Instructor.email == email).first()


def create_instructor(db: Session, instructor_data, is_admin: bool = False) -> Instructor:
    if get_instructor_by_email(db, instructor_data.email):
        raise DuplicateEmail()

    db_instructor = Instructor(
        name=instructor_data.name,
        email=instructor_data.email,
        hashed_password=get_password_hash(instructor_data.password),
        is_admin=is_admin,
    )
    db.add(db_instructor)
    try:
        db.flush()
    except IntegrityError:
        # lost a race with a concurrent registration of the same email
        db.rollback()
        raise DuplicateEmail()
    commit_or_fail(db, "register instructor")
    db.refresh(db_instructor)
    logger.info(f"✅ [Auth] Instructor registered id={db_instructor.id}")
    return db_instructor


def authenticate(db: Session, email: str, password: str) -> Instructor:
    instructor = get_instructor_by_email(db, email)
    if not instructor:
        logger.info("[Auth] Login rejected: unknown email")
        raise Unauthorized("Email is not registered")
    if not verify_password(password, instructor.hashed_password):
        logger.info(f"[Auth] Login rejected: bad password for id={instructor.id}")
        raise Unauthorized("Incorrect password")
    return instructor


def set_admin(db: Session, email: str, is_admin: bool = True) -> Instructor:
    instructor = get_instructor_by_email(db, email)
    if not instructor:
        raise NotFound("Instructor not found")
    instructor.is_admin = is_admin
    commit_or_fail(db, "change admin flag")
    db.refresh(instructor)
    logger.info(f"[Admin] Instructor id={instructor.id} is_admin={is_admin}")
    return instructor
