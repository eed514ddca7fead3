"""Application-related Pydantic schemas."""

from typing import Any, Optional
from pydantic import BaseModel, Field


class CategorySubmission(BaseModel):
    """One category sub-application as sent by clients."""
    
    status: Optional[dict[str, str]] = Field(
        None,
        description="Reviewer, award or mentor name to status label"
    )
    contents: Optional[dict[str, Any]] = Field(
        None,
        description="Title to submission data ({content, salutation})"
    )
    attachments: Optional[dict[str, list[str]]] = Field(
        None,
        description="Title to uploaded filenames"
    )
    
    model_config = {"extra": "ignore"}


class _ApplicationBody(BaseModel):
    """Shared fields; dumps to the stored document shape."""
    
    applicant_name: Optional[str] = Field(None, alias="applicantName", max_length=255)
    honor: Optional[CategorySubmission] = None
    scholarship: Optional[CategorySubmission] = None
    financial_aid: Optional[CategorySubmission] = Field(None, alias="financialAid")
    mentor: Optional[CategorySubmission] = None
    
    def to_document(self) -> dict[str, Any]:
        """Only the fields the client actually sent, with camelCase keys."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class ApplicationCreateRequest(_ApplicationBody):
    """Request schema for submitting an application."""
    
    applicant_id: int = Field(..., alias="applicantId", description="Student number")
    year: int = Field(..., description="Application year")
    
    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "applicantId": 2016011000,
                    "applicantName": "张三",
                    "year": 2018,
                    "mentor": {
                        "status": {"邱勇": "申请中"},
                        "contents": {"statement": "我是一个好学生"}
                    }
                }
            ]
        }
    }


class ApplicationUpdateRequest(_ApplicationBody):
    """Request schema for amending an application; every field is optional."""
    
    applicant_id: Optional[int] = Field(None, alias="applicantId")
    year: Optional[int] = None
    
    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "scholarship": {
                        "status": {"好读书奖学金": "已通过"}
                    }
                }
            ]
        }
    }
