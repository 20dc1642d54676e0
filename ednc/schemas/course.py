# ednc/schemas/course.py
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from ednc.core.lifecycle import has_schedule
from ednc.schemas._validators import require_text, blank_to_none


class CourseIn(BaseModel):
    """Body of course create and update requests."""

    name: str
    schedule: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @field_validator("name", mode="before")
    @classmethod
    def name_required(cls, value):
        return require_text(value)

    @field_validator("schedule", "start_date", "end_date", mode="before")
    @classmethod
    def optional_blank(cls, value):
        return blank_to_none(value)

    @model_validator(mode="after")
    def check_schedule(self):
        if not has_schedule(self.schedule, self.start_date, self.end_date):
            raise ValueError("Either a schedule text or both start and end dates are required")
        if self.schedule is not None:
            self.schedule = self.schedule.strip()
        return self


class CourseOut(BaseModel):
    id: int
    name: str
    schedule: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    instructor_id: int
    instructor_name: Optional[str] = None
    status: str
    created_at: datetime

    class Config:
        from_attributes = True


class CourseCount(BaseModel):
    total: int
