"""Company database model.

Companies own employees through ``employees.company_id``. The foreign key
restricts deletes, so a company can only be removed once it has no
employees left.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel


class CompanyModel(BaseMutableModel):
    """Company model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when created (from BaseMutableModel)
        updated_at: Timestamp when last updated (from BaseMutableModel)
        name: Display name
        slug: Unique URL-safe identifier
        domain: Optional web domain (nullable)

    Relationships:
        - employees: One-to-many, loaded only on request
    """

    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(
        String(120),
        nullable=False,
        comment="Company display name",
    )

    slug: Mapped[str] = mapped_column(
        String(80),
        nullable=False,
        unique=True,
        comment="Unique URL-safe identifier",
    )

    domain: Mapped[str | None] = mapped_column(
        String(120),
        nullable=True,
        comment="Web domain, e.g. acme.com",
    )

    employees: Mapped[list["EmployeeModel"]] = relationship(  # noqa: F821
        back_populates="company",
        lazy="raise",
        passive_deletes="all",
        order_by="EmployeeModel.created_at",
    )
