# ednc/crud/student.py
import logging
from datetime import datetime
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from ednc.core.access import Action, Principal, is_allowed
from ednc.core.exceptions import DuplicateRegistration, Forbidden, NotFound, StorageFailure
from ednc.core.lifecycle import derive_status
from ednc.db.models.course import Course
from ednc.db.models.student import Student
from ednc.db.session import commit_or_fail

logger = logging.getLogger(__name__)


def get_student(db: Session, student_id: int):
    return db.query(Student).filter(Student.id == student_id).first()


def _already_registered(db: Session, email: str, course_id: int, exclude_id: int | None = None) -> bool:
    query = db.query(Student.id).filter(Student.email == email, Student.course_id == course_id)
    if exclude_id is not None:
        query = query.filter(Student.id != exclude_id)
    return query.first() is not None


def _flush_registration(db: Session) -> None:
    try:
        db.flush()
    except IntegrityError as e:
        db.rollback()
        # a concurrent request took the same (email, course) slot
        if "unique" in str(e.orig).lower():
            raise DuplicateRegistration()
        logger.exception("❌ [DB] Failed to save registration")
        raise StorageFailure()


def create_student(db: Session, student_data) -> Student:
    if not db.query(Course.id).filter(Course.id == student_data.course_id).first():
        raise NotFound("Course not found")
    if _already_registered(db, student_data.email, student_data.course_id):
        raise DuplicateRegistration()

    db_student = Student(**student_data.model_dump())
    db.add(db_student)
    _flush_registration(db)
    commit_or_fail(db, "register student")
    db.refresh(db_student)
    logger.info(f"✅ [Students] Registration id={db_student.id} for course id={db_student.course_id}")
    return db_student


def update_student(db: Session, student_id: int, student_data) -> Student:
    student = get_student(db, student_id)
    if not student:
        raise NotFound("Student registration not found")
    if _already_registered(db, student_data.email, student.course_id, exclude_id=student.id):
        raise DuplicateRegistration()

    for field, value in student_data.model_dump().items():
        setattr(student, field, value)
    student.updated_at = datetime.utcnow()
    _flush_registration(db)
    commit_or_fail(db, "update student")
    db.refresh(student)
    return student


def delete_student(db: Session, student_id: int) -> None:
    student = get_student(db, student_id)
    if not student:
        raise NotFound("Student registration not found")
    db.delete(student)
    commit_or_fail(db, "delete student")
    logger.info(f"🗑️ [Students] Registration id={student_id} deleted")


def find_by_email_and_course(db: Session, email: str, course_id: int) -> Student:
    student = (
        db.query(Student)
        .filter(Student.email == email, Student.course_id == course_id)
        .first()
    )
    if not student:
        raise NotFound("No registration found")
    return student


def list_by_course(db: Session, principal: Principal, course_id: int) -> List[Student]:
    course = db.query(Course).filter(Course.id == course_id).first()
    if not course or not is_allowed(principal, course.instructor_id, Action.VIEW_ROSTER):
        raise Forbidden()

    return (
        db.query(Student)
        .filter(Student.course_id == course_id)
        .order_by(Student.created_at.desc(), Student.id.desc())
        .all()
    )


def find_all_by_email(db: Session, email: str) -> List[dict]:
    """Every registration made under ``email``, newest first, with its course."""
    students = (
        db.query(Student)
        .options(joinedload(Student.course).joinedload(Course.instructor))
        .filter(Student.email == email)
        .order_by(Student.created_at.desc(), Student.id.desc())
        .all()
    )
    if not students:
        raise NotFound("No registration found")

    result = []
    for s in students:
        course = s.course
        result.append({
            "student_id": s.id,
            "name": s.name,
            "english_name": s.english_name,
            "email": s.email,
            "affiliation": s.affiliation,
            "phone": s.phone,
            "birth_date": s.birth_date,
            "created_at": s.created_at,
            "updated_at": s.updated_at,
            "course_id": course.id,
            "course_name": course.name,
            "schedule": course.schedule,
            "start_date": course.start_date,
            "end_date": course.end_date,
            "instructor_name": course.instructor_name,
            "status": derive_status(course.start_date, course.end_date).value,
        })
    return result
