# ednc/api/students.py
# Registration endpoints are open to anonymous students; only the roster
# of a course needs an instructor token.
import csv
import io
from typing import List
from urllib.parse import quote

from fastapi import APIRouter, Depends, status
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from ednc.api.deps import get_db, get_current_principal
from ednc.core.access import Principal
from ednc.crud import course as crud_course
from ednc.crud import student as crud_student
from ednc.schemas.student import StudentCourseOut, StudentCreate, StudentOut, StudentUpdate

router = APIRouter()


@router.post("", response_model=StudentOut, status_code=status.HTTP_201_CREATED)
def create_student(student_in: StudentCreate, db: Session = Depends(get_db)):
    return crud_student.create_student(db, student_in)


@router.put("/{student_id}", response_model=StudentOut)
def update_student(student_id: int, student_in: StudentUpdate, db: Session = Depends(get_db)):
    return crud_student.update_student(db, student_id, student_in)


@router.delete("/{student_id}")
def delete_student(student_id: int, db: Session = Depends(get_db)):
    crud_student.delete_student(db, student_id)
    return {"message": "Student registration deleted"}


@router.get("/lookup/{email}/{course_id}", response_model=StudentOut)
def lookup_student(email: str, course_id: int, db: Session = Depends(get_db)):
    return crud_student.find_by_email_and_course(db, email, course_id)


@router.get("/courses/{email}", response_model=List[StudentCourseOut])
def student_courses(email: str, db: Session = Depends(get_db)):
    return crud_student.find_all_by_email(db, email)


@router.get("/course/{course_id}", response_model=List[StudentOut])
def course_roster(
    course_id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    return crud_student.list_by_course(db, principal, course_id)


ROSTER_EXPORT_HEADER = ["Name", "English Name", "Email", "Affiliation", "Phone", "Birth Date", "Registered At"]


@router.get("/course/{course_id}/export")
def export_course_roster(
    course_id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    """Roster of a course as a CSV download, newest registration first."""
    students = crud_student.list_by_course(db, principal, course_id)
    course = crud_course.get_course(db, course_id)

    output = io.StringIO()
    # BOM so spreadsheet apps open non-ASCII names correctly
    output.write("\ufeff")
    writer = csv.writer(output)
    writer.writerow(ROSTER_EXPORT_HEADER)
    for s in students:
        writer.writerow([
            s.name,
            s.english_name,
            s.email,
            s.affiliation,
            s.phone,  # written verbatim, leading zeros included
            s.birth_date,
            s.created_at.strftime("%Y-%m-%d %H:%M:%S") if s.created_at else "",
        ])
    output.seek(0)

    filename = f"{course.name}_roster.csv"
    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": (
                f"attachment; filename=course_{course_id}_roster.csv; "
                f"filename*=UTF-8''{quote(filename)}"
            )
        },
    )
