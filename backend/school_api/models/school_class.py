"""
School Records API: Class Model
=================================

ORM model for the `classes` table. Named SchoolClass to keep `Class` free
of confusion with Python's `class` keyword; the API still calls it a class.

`class_id` is a caller-supplied class number (distinct from the primary
key `id`); `student_id` is FK-shaped and unenforced.
"""

from sqlalchemy import Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from school_api.database import Base
from school_api.models.base import EntityMixin


class SchoolClass(EntityMixin, Base):
    __tablename__ = "classes"

    WRITABLE_FIELDS = ("class_id", "class_name", "student_id")

    class_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    class_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        server_default=text("''"),
    )

    student_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )
