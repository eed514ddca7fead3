"""Application SQLAlchemy model."""

from datetime import datetime
from sqlalchemy import String, Integer, DateTime, JSON, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class ApplicationModel(Base):
    """SQLAlchemy model for applications; each category is a JSON document."""
    
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("applicant_id", "year", name="uq_applications_applicant_year"),
    )
    
    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    
    # Applicant
    applicant_id: Mapped[int | None] = mapped_column(Integer, index=True, nullable=True)
    applicant_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    
    # Category sub-applications
    honor: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    scholarship: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    financial_aid: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    mentor: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    
    # Audit
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        nullable=False
    )
    created_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        nullable=False
    )
    updated_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    
    def __repr__(self) -> str:
        return f"<ApplicationModel(id={self.id}, applicant_id={self.applicant_id}, year={self.year})>"
