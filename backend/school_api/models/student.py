"""
School Records API: Student Model
===================================

ORM model for the `students` table.

Table Design:
    - student_id: Informational roll number chosen by the caller; it is
      NOT the primary key and is not unique.
    - marks: Plain integer, defaults to 0.
    - address: Embedded value stored inline as three columns
      (street, city, state) and exposed on the model as one `Address`
      object through an SQLAlchemy composite.
"""

import dataclasses

from sqlalchemy import Integer, String, text
from sqlalchemy.orm import Mapped, composite, mapped_column

from school_api.database import Base
from school_api.models.base import EntityMixin


@dataclasses.dataclass
class Address:
    street: str = ""
    city: str = ""
    state: str = ""


def _address_column(name: str):
    return mapped_column(
        name,
        String(255),
        nullable=False,
        default="",
        server_default=text("''"),
    )


class Student(EntityMixin, Base):
    __tablename__ = "students"

    WRITABLE_FIELDS = ("student_id", "name", "marks", "address")

    student_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        server_default=text("''"),
    )

    marks: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    address: Mapped[Address] = composite(
        _address_column("street"),
        _address_column("city"),
        _address_column("state"),
    )
