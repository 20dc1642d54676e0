# ednc/crud/course.py
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import case
from sqlalchemy.orm import Session, joinedload

from ednc.core.access import Action, Principal, is_allowed
from ednc.core.exceptions import NotFoundOrForbidden
from ednc.db.models.course import Course
from ednc.db.models.student import Student
from ednc.db.session import commit_or_fail

logger = logging.getLogger(__name__)


def dashboard_phase(today: date):
    """Undated courses first, then not-yet-started, then everything else."""
    return case(
        (Course.start_date.is_(None), 0),
        (Course.start_date >= today, 1),
        else_=2,
    )


def dashboard_order(today: date):
    return (
        dashboard_phase(today),
        Course.start_date.asc().nulls_first(),
        Course.created_at.desc(),
        Course.id.desc(),
    )


def get_course(db: Session, course_id: int) -> Optional[Course]:
    return db.query(Course).filter(Course.id == course_id).first()


def create_course(db: Session, course_data, instructor_id: int) -> Course:
    db_course = Course(**course_data.model_dump(), instructor_id=instructor_id)
    db.add(db_course)
    commit_or_fail(db, "create course")
    db.refresh(db_course)
    logger.info(f"✅ [Courses] Course id={db_course.id} created by instructor id={instructor_id}")
    return db_course


def list_courses_for(db: Session, principal: Principal, today: Optional[date] = None) -> List[Course]:
    today = today or date.today()
    query = db.query(Course).options(joinedload(Course.instructor))
    if not is_allowed(principal, None, Action.LIST_ALL_COURSES):
        query = query.filter(Course.instructor_id == principal.id)
    return query.order_by(*dashboard_order(today)).all()


def update_course(db: Session, principal: Principal, course_id: int, course_data) -> Course:
    course = get_course(db, course_id)
    if not course or not is_allowed(principal, course.instructor_id, Action.UPDATE_COURSE):
        logger.info(f"[Courses] Update of course id={course_id} refused for instructor id={principal.id}")
        raise NotFoundOrForbidden()

    for field, value in course_data.model_dump().items():
        setattr(course, field, value)
    commit_or_fail(db, "update course")
    db.refresh(course)
    return course


def delete_course(db: Session, principal: Principal, course_id: int) -> None:
    """Remove a course together with its roster.

    Authorization is decided before anything is touched; registrations and
    the course then go in a single commit.
    """
    course = get_course(db, course_id)
    if not course or not is_allowed(principal, course.instructor_id, Action.DELETE_COURSE):
        logger.info(f"[Courses] Delete of course id={course_id} refused for instructor id={principal.id}")
        raise NotFoundOrForbidden()

    removed = (
        db.query(Student)
        .filter(Student.course_id == course_id)
        .delete(synchronize_session=False)
    )
    db.delete(course)
    commit_or_fail(db, "delete course")
    logger.info(f"🗑️ [Courses] Course id={course_id} deleted with {removed} registrations")
