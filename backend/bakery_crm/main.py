"""
FastAPI application entry point.
Assembles the app with routers, middleware, lifespan handlers, and exception handlers.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from bakery_crm.api.v1.router import api_router
from bakery_crm.core.config import settings
from bakery_crm.core.exceptions import setup_exception_handlers
from bakery_crm.core.logging import setup_logging
from bakery_crm.core.rate_limit import limiter
from bakery_crm.db.init_db import create_tables, seed_initial_data
from bakery_crm.db.session import init_db, close_db
from bakery_crm.deps.di_container import Container
from bakery_crm.core.integrations.observability import setup_observability


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    Initializes logging, DB, tables, seed data and the DI container.
    """
    # Startup
    setup_logging()
    setup_observability()
    
    await init_db()
    await create_tables()
    await seed_initial_data()
    
    container = Container()
    container.config.from_dict({
        "database_url": settings.DATABASE_URL,
    })
    app.state.container = container
    
    # Initialize global container instance
    import bakery_crm.deps.di_container as di_module
    di_module._container = container
    
    yield
    
    # Shutdown
    await close_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Bakery CRM API: inquiries, clients, sales orders and invoices",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    
    # Include API router
    app.include_router(api_router, prefix=settings.API_V1_PREFIX)
    
    # Add root-level health endpoint for convenience
    from bakery_crm.api.v1.endpoints.health import get_health
    
    @app.get("/health", response_model=None, include_in_schema=False)
    async def root_health(request: Request):
        """Root-level health check endpoint."""
        return await get_health(request)
    
    # Global exception handler
    setup_exception_handlers(app)
    
    return app


app = create_app()
