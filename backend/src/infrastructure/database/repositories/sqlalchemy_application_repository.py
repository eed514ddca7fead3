"""SQLAlchemy implementation of application repository."""

from typing import Any, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import flag_modified

from domain.entities import Application
from domain.repositories import IApplicationRepository
from infrastructure.database.models import ApplicationModel

FILTER_COLUMNS = {
    "applicantId": ApplicationModel.applicant_id,
    "applicantName": ApplicationModel.applicant_name,
    "year": ApplicationModel.year,
}

CATEGORY_COLUMNS = ("honor", "scholarship", "financial_aid", "mentor")


class SQLAlchemyApplicationRepository(IApplicationRepository):
    """
    Concrete implementation of IApplicationRepository using SQLAlchemy.
    
    Writes are committed immediately so that a stored record is visible to
    the background notification session and to the response's Location.
    """
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, application: Application) -> Application:
        """Create a new application in the database."""
        model = self._entity_to_model(application)
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        return self._model_to_entity(model)
    
    async def get_by_id(self, application_id: int) -> Optional[Application]:
        """Retrieve an application by ID."""
        model = await self._get_model(application_id)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def get_by_applicant_and_year(self, applicant_id: int, year: int) -> Optional[Application]:
        """Retrieve the application of an applicant for a year."""
        stmt = select(ApplicationModel).where(
            ApplicationModel.applicant_id == applicant_id,
            ApplicationModel.year == year,
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def find(
        self,
        filters: Optional[dict[str, Any]] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> list[Application]:
        """List applications matching equality filters."""
        stmt = select(ApplicationModel).order_by(ApplicationModel.id)
        for key, value in (filters or {}).items():
            column = FILTER_COLUMNS.get(key)
            if column is not None and value is not None:
                stmt = stmt.where(column == value)
        if skip:
            stmt = stmt.offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]
    
    async def update(self, application: Application) -> Application:
        """Persist the full state of an existing application."""
        model = await self._get_model(application.id)
        
        if model is None:
            raise ValueError(f"Application {application.id} not found")
        
        self._update_model_from_entity(model, application)
        await self.session.commit()
        await self.session.refresh(model)
        
        return self._model_to_entity(model)
    
    async def delete(self, application_id: int) -> bool:
        """Delete an application."""
        model = await self._get_model(application_id)
        
        if model is None:
            return False
        
        await self.session.delete(model)
        await self.session.commit()
        return True
    
    async def _get_model(self, application_id: Optional[int]) -> Optional[ApplicationModel]:
        stmt = select(ApplicationModel).where(ApplicationModel.id == application_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
    
    def _entity_to_model(self, entity: Application) -> ApplicationModel:
        """Convert domain entity to ORM model."""
        return ApplicationModel(
            id=entity.id,
            applicant_id=entity.applicant_id,
            applicant_name=entity.applicant_name,
            year=entity.year,
            honor=entity.honor,
            scholarship=entity.scholarship,
            financial_aid=entity.financial_aid,
            mentor=entity.mentor,
            created_at=entity.created_at,
            created_by=entity.created_by,
            updated_at=entity.updated_at,
            updated_by=entity.updated_by,
        )
    
    def _update_model_from_entity(self, model: ApplicationModel, entity: Application) -> None:
        """Update ORM model from domain entity."""
        model.applicant_id = entity.applicant_id
        model.applicant_name = entity.applicant_name
        model.year = entity.year
        model.updated_at = entity.updated_at
        model.updated_by = entity.updated_by
        
        # JSON columns are replaced wholesale; flag them so nested edits are written
        for column in CATEGORY_COLUMNS:
            setattr(model, column, getattr(entity, column))
            flag_modified(model, column)
    
    def _model_to_entity(self, model: ApplicationModel) -> Application:
        """Convert ORM model to domain entity."""
        return Application(
            id=model.id,
            applicant_id=model.applicant_id,
            applicant_name=model.applicant_name,
            year=model.year,
            honor=model.honor,
            scholarship=model.scholarship,
            financial_aid=model.financial_aid,
            mentor=model.mentor,
            created_at=model.created_at,
            created_by=model.created_by,
            updated_at=model.updated_at,
            updated_by=model.updated_by,
        )
