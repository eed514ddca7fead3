"""Student, teacher and reviewer SQLAlchemy models (read by the application core)."""

from sqlalchemy import String, Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class StudentModel(Base):
    """SQLAlchemy model for students."""
    
    __tablename__ = "students"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    class_name: Mapped[str | None] = mapped_column("class", String(50), nullable=True)
    
    def __repr__(self) -> str:
        return f"<StudentModel(id={self.id}, class={self.class_name})>"


class TeacherModel(Base):
    """SQLAlchemy model for teachers."""
    
    __tablename__ = "teachers"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    total_applications: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    authorizations: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    
    def __repr__(self) -> str:
        return f"<TeacherModel(id={self.id}, name={self.name})>"


class ReviewerModel(Base):
    """SQLAlchemy model for reviewers."""
    
    __tablename__ = "reviewers"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    authorizations: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    
    def __repr__(self) -> str:
        return f"<ReviewerModel(id={self.id}, name={self.name})>"
