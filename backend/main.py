"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infrastructure.config import get_settings, setup_logger
from infrastructure.config.logger import APP_LOGGER_NAME
from infrastructure.database import init_db, close_db
from presentation.api.v1.endpoints import applications, e_forms, health, thank_letters
from presentation.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    
    # Setup logging
    logger = setup_logger(
        name=APP_LOGGER_NAME,
        level=settings.log_level,
        log_format=settings.log_format,
    )
    
    # Initialize database
    logger.info(f"Starting {settings.app_name} ({settings.environment})")
    await init_db()
    
    yield
    
    # Shutdown
    await close_db()


# Create FastAPI app
settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location", "Content-Disposition"],
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router, prefix=settings.api_v1_prefix)
app.include_router(applications.router, prefix=settings.api_v1_prefix)
app.include_router(thank_letters.router, prefix=settings.api_v1_prefix)
app.include_router(e_forms.router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
