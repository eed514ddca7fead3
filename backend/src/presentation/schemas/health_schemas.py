"""Health check Pydantic schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response schema."""
    
    status: str = Field(..., description="Service status")
    name: str = Field(..., description="Service name")
    version: str = Field(..., description="API version")
    environment: str = Field(..., description="Deployment environment")
    notifications_enabled: bool = Field(..., description="Whether SMTP is configured")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "name": "Department Benefit Applications",
                    "version": "1.0.0",
                    "environment": "development",
                    "notifications_enabled": False
                }
            ]
        }
    }
