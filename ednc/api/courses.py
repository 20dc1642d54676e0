# ednc/api/courses.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ednc.api.deps import get_db, get_current_principal
from ednc.core.access import Principal
from ednc.crud import course as crud_course
from ednc.schemas.course import CourseIn, CourseOut

router = APIRouter()


# Admins see every course, instructors only their own
@router.get("", response_model=List[CourseOut])
def read_courses(
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    return crud_course.list_courses_for(db, principal)


@router.post("", response_model=CourseOut, status_code=status.HTTP_201_CREATED)
def create_course(
    course_in: CourseIn,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    return crud_course.create_course(db, course_in, instructor_id=principal.id)


@router.put("/{course_id}", response_model=CourseOut)
def update_course(
    course_id: int,
    course_in: CourseIn,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    return crud_course.update_course(db, principal, course_id, course_in)


@router.delete("/{course_id}")
def delete_course(
    course_id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    crud_course.delete_course(db, principal, course_id)
    return {"message": "Course deleted"}
