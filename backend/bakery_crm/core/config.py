"""
Application configuration using Pydantic BaseSettings.
Loads environment variables and provides typed configuration.
"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Project metadata
    PROJECT_NAME: str = "Treat Yo Self Bakery CRM"
    VERSION: str = "0.1.0"
    API_V1_PREFIX: str = "/api/v1"
    
    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./bakery_crm.db"
    DATABASE_ECHO: bool = False
    DB_CREATE_TABLES: bool = True
    SEED_DEFAULT_DATA: bool = True
    
    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://frontend:3000",
    ]
    
    # Logging / observability
    LOG_LEVEL: str = "INFO"
    OTEL_SERVICE_NAME: str = "bakery-crm-backend"
    OTEL_ENVIRONMENT: str = "development"
    
    # Rate limiting (public inquiry form)
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_PER_MINUTE: int = 60
    
    # Business rules
    TAX_RATE: float = 0.16
    INVOICE_DUE_DAYS: int = 30
    TOP_CLIENTS_LIMIT: int = 5
    
    # Accounts
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: str = "admin"
    MIN_PASSWORD_LENGTH: int = 4
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
