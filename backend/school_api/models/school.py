"""
School Records API: School Model
==================================

ORM model for the `schools` table. `class_id` is shaped like a foreign key
to `classes.id` but is stored as a plain integer; no constraint is declared
and nothing checks that the class exists.
"""

from sqlalchemy import Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from school_api.database import Base
from school_api.models.base import EntityMixin


class School(EntityMixin, Base):
    __tablename__ = "schools"

    # Fields an update request overwrites
    WRITABLE_FIELDS = ("name", "class_id")

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        server_default=text("''"),
    )

    class_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )
