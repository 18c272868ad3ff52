"""
Course CRUD operations.

Dependencies: sqlalchemy, feedback_backend.boundary.db.models
System role: Course persistence operations
"""

from feedback_backend.boundary.db.models.course_model import CourseModel
from feedback_backend.boundary.db.CRUD.base_crud import BaseCRUD


class CourseCRUD(BaseCRUD[CourseModel]):
    """CRUD operations for CourseModel (string primary key)."""

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)


course_crud = CourseCRUD()
