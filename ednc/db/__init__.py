# ednc/db/__init__.py
# Importing the package registers every model on Base.metadata

from ednc.db.base import Base
from ednc.db.models.instructor import Instructor
from ednc.db.models.course import Course
from ednc.db.models.student import Student

__all__ = ["Base", "Instructor", "Course", "Student"]
