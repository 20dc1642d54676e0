# ednc/db/models/course.py
from datetime import datetime

from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from ednc.core.lifecycle import derive_status
from ednc.db.base import Base


class Course(Base):
    __tablename__ = "courses"
    __table_args__ = (
        # free-text schedule or a complete date range, never neither
        CheckConstraint(
            "(schedule IS NOT NULL AND trim(schedule) <> '') "
            "OR (start_date IS NOT NULL AND end_date IS NOT NULL)",
            name="ck_courses_schedule_present",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    schedule = Column(String, nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    instructor_id = Column(Integer, ForeignKey("instructors.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    instructor = relationship("Instructor", back_populates="courses")
    students = relationship("Student", back_populates="course", passive_deletes=True)

    @property
    def instructor_name(self) -> str | None:
        return self.instructor.name if self.instructor else None

    @property
    def status(self) -> str:
        return derive_status(self.start_date, self.end_date).value
