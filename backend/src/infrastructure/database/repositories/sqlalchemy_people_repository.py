"""SQLAlchemy implementations of student, teacher and reviewer repositories."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Reviewer, Student, Teacher
from domain.repositories import IReviewerRepository, IStudentRepository, ITeacherRepository
from infrastructure.database.models import ReviewerModel, StudentModel, TeacherModel


class SQLAlchemyStudentRepository(IStudentRepository):
    """Concrete implementation of IStudentRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def get_by_id(self, student_id: int) -> Optional[Student]:
        """Retrieve a student by external id."""
        stmt = select(StudentModel).where(StudentModel.id == student_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return Student(
            id=model.id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            class_name=model.class_name,
        )


class SQLAlchemyTeacherRepository(ITeacherRepository):
    """Concrete implementation of ITeacherRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        """Retrieve a teacher by id."""
        model = await self._get_model(TeacherModel.id == teacher_id)
        return self._model_to_entity(model) if model else None
    
    async def get_by_name(self, name: str) -> Optional[Teacher]:
        """Retrieve a teacher by name."""
        model = await self._get_model(TeacherModel.name == name)
        return self._model_to_entity(model) if model else None
    
    async def update(self, teacher: Teacher) -> Teacher:
        """Persist teacher changes."""
        model = await self._get_model(TeacherModel.id == teacher.id)
        
        if model is None:
            raise ValueError(f"Teacher {teacher.id} not found")
        
        model.name = teacher.name
        model.email = teacher.email
        model.total_applications = teacher.total_applications
        model.authorizations = list(teacher.authorizations)
        await self.session.commit()
        await self.session.refresh(model)
        
        return self._model_to_entity(model)
    
    async def _get_model(self, condition) -> Optional[TeacherModel]:
        stmt = select(TeacherModel).where(condition)
        result = await self.session.execute(stmt)
        return result.scalars().first()
    
    def _model_to_entity(self, model: TeacherModel) -> Teacher:
        """Convert ORM model to domain entity."""
        return Teacher(
            id=model.id,
            name=model.name,
            email=model.email,
            total_applications=model.total_applications or 0,
            authorizations=list(model.authorizations or []),
        )


class SQLAlchemyReviewerRepository(IReviewerRepository):
    """Concrete implementation of IReviewerRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def get_by_id(self, reviewer_id: int) -> Optional[Reviewer]:
        """Retrieve a reviewer by id."""
        stmt = select(ReviewerModel).where(ReviewerModel.id == reviewer_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return Reviewer(
            id=model.id,
            name=model.name,
            authorizations=list(model.authorizations or []),
        )
