"""create_companies_and_employees

Rows written by the application carry time-ordered UUIDv7 ids; the
``gen_random_uuid()`` server default covers rows inserted directly in SQL.

Revision ID: 7c3e1a9d2b4f
Revises:
Create Date: 2025-10-20 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "7c3e1a9d2b4f"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

department_enum = postgresql.ENUM(
    "engineering",
    "sales",
    "marketing",
    "hr",
    "finance",
    name="department",
    create_type=False,
)


def upgrade() -> None:
    """Create companies, employees and the department enum."""
    department_enum.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "companies",
        # Primary key and timestamps from BaseMutableModel
        sa.Column(
            "id",
            sa.Uuid(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "name",
            sa.String(length=120),
            nullable=False,
            comment="Company display name",
        ),
        sa.Column(
            "slug",
            sa.String(length=80),
            nullable=False,
            comment="Unique URL-safe identifier",
        ),
        sa.Column(
            "domain",
            sa.String(length=120),
            nullable=True,
            comment="Web domain, e.g. acme.com",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )

    op.create_table(
        "employees",
        sa.Column(
            "id",
            sa.Uuid(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("first_name", sa.String(length=50), nullable=False),
        sa.Column("last_name", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=20), nullable=True),
        sa.Column("department", department_enum, nullable=False),
        sa.Column("position", sa.String(length=100), nullable=False),
        sa.Column("hire_date", sa.Date(), nullable=False),
        sa.Column("salary", sa.Integer(), nullable=False),
        sa.Column(
            "is_active",
            sa.Boolean(),
            server_default=sa.true(),
            nullable=False,
        ),
        sa.Column(
            "company_id",
            sa.Uuid(),
            nullable=False,
            comment="FK to companies table",
        ),
        sa.ForeignKeyConstraint(
            ["company_id"],
            ["companies.id"],
            onupdate="CASCADE",
            ondelete="RESTRICT",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index(
        op.f("ix_employees_company_id"),
        "employees",
        ["company_id"],
        unique=False,
    )


def downgrade() -> None:
    """Drop employees, companies and the department enum."""
    op.drop_index(op.f("ix_employees_company_id"), table_name="employees")
    op.drop_table("employees")
    op.drop_table("companies")
    department_enum.drop(op.get_bind(), checkfirst=True)
