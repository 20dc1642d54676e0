from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from ednc.db.base import Base


class Student(Base):
    __tablename__ = "students"
    __table_args__ = (
        UniqueConstraint("email", "course_id", name="uq_students_email_course"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    english_name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    affiliation = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    birth_date = Column(String, nullable=False)  # kept as submitted, e.g. 1990-01-31
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    course = relationship("Course", back_populates="students")
