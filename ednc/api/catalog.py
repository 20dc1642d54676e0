# ednc/api/catalog.py
# Public course catalog. No authentication dependency may be added here.
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ednc.api.deps import get_db
from ednc.crud import catalog as crud_catalog
from ednc.schemas.course import CourseCount, CourseOut

router = APIRouter()


@router.get("", response_model=List[CourseOut])
def read_public_courses(
    search: Optional[str] = Query(None, description="Matches course or instructor name"),
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    return crud_catalog.list_public(db, search=search, limit=limit)


@router.get("/count", response_model=CourseCount)
def count_public_courses(
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return {"total": crud_catalog.count_public(db, search=search)}
