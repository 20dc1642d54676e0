from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ednc.schemas._validators import require_text

PERSONAL_FIELDS = ("name", "english_name", "email", "affiliation", "phone", "birth_date")


class StudentUpdate(BaseModel):
    name: str
    english_name: str
    email: str
    affiliation: str
    phone: str
    birth_date: str

    @field_validator(*PERSONAL_FIELDS, mode="before")
    @classmethod
    def not_blank(cls, value):
        return require_text(value)


class StudentCreate(StudentUpdate):
    course_id: int


class StudentOut(BaseModel):
    id: int
    name: str
    english_name: str
    email: str
    affiliation: str
    phone: str
    birth_date: str
    course_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class StudentCourseOut(BaseModel):
    """One registration of a student joined with its course."""

    student_id: int
    name: str
    english_name: str
    email: str
    affiliation: str
    phone: str
    birth_date: str
    created_at: datetime
    updated_at: datetime
    course_id: int
    course_name: str
    schedule: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    instructor_name: Optional[str] = None
    status: str
