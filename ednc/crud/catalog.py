# ednc/crud/catalog.py
# Read-only queries behind the public course listing. Nothing here takes a
# principal: anonymous visitors see the same catalog as everybody else.
from datetime import date
from typing import List, Optional

from sqlalchemy import case, or_
from sqlalchemy.orm import Session, contains_eager

from ednc.db.models.course import Course
from ednc.db.models.instructor import Instructor


def catalog_phase(today: date):
    """Upcoming first, then undated or still running, then finished."""
    return case(
        (Course.start_date.is_(None), 1),
        (Course.start_date > today, 0),
        (or_(Course.end_date.is_(None), Course.end_date >= today), 1),
        else_=2,
    )


def _catalog_query(db: Session, search: Optional[str]):
    query = db.query(Course).join(Course.instructor)
    if search:
        query = query.filter(
            or_(
                Course.name.icontains(search, autoescape=True),
                Instructor.name.icontains(search, autoescape=True),
            )
        )
    return query


def list_public(
    db: Session,
    search: Optional[str] = None,
    limit: Optional[int] = None,
    today: Optional[date] = None,
) -> List[Course]:
    today = today or date.today()
    query = (
        _catalog_query(db, search)
        .options(contains_eager(Course.instructor))
        .order_by(
            catalog_phase(today),
            Course.start_date.asc().nulls_first(),
            Course.created_at.desc(),
            Course.id.desc(),
        )
    )
    if limit:
        query = query.limit(limit)
    return query.all()


def count_public(db: Session, search: Optional[str] = None) -> int:
    return _catalog_query(db, search).count()
