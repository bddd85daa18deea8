"""Create schools, classes and students tables

Revision ID: 001
Revises: None
Create Date: 2024-06-01 00:00:00.000000+00:00

What:  Baseline schema, identical to what Base.metadata.create_all() builds
       on startup. Deployments that manage the schema with Alembic set
       DB_AUTO_CREATE_TABLES=false and run `alembic upgrade head` instead.

No foreign keys are declared: class_id / student_id are plain integers.
"""

from typing import List, Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _entity_columns() -> List[sa.Column]:
    """id, timestamps and the soft-delete marker shared by every table."""
    return [
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def _text(name: str) -> sa.Column:
    return sa.Column(name, sa.String(255), server_default=sa.text("''"), nullable=False)


def _number(name: str) -> sa.Column:
    return sa.Column(name, sa.Integer(), server_default=sa.text("0"), nullable=False)


TABLES = {
    "schools": lambda: [_text("name"), _number("class_id")],
    "classes": lambda: [_number("class_id"), _text("class_name"), _number("student_id")],
    "students": lambda: [
        _number("student_id"),
        _text("name"),
        _number("marks"),
        _text("street"),
        _text("city"),
        _text("state"),
    ],
}


def upgrade() -> None:
    for table, columns in TABLES.items():
        op.create_table(
            table,
            *_entity_columns(),
            *columns(),
            sa.PrimaryKeyConstraint("id"),
        )
        # Matches the index=True on EntityMixin.deleted_at
        op.create_index(f"ix_{table}_deleted_at", table, ["deleted_at"])


def downgrade() -> None:
    """Drops all three tables; every record, active or deleted, is lost."""
    for table in reversed(list(TABLES)):
        op.drop_index(f"ix_{table}_deleted_at", table_name=table)
        op.drop_table(table)
