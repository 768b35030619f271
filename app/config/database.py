from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from .settings import settings
from app.shared.database.query import QueryClient

# Create engine
engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    pool_recycle=300,
    echo=settings.debug
)

# Base class for models (tablas réplica del ERP)
Base = declarative_base()

# Database dependency
def get_query_client() -> QueryClient:
    """Query client dependency for FastAPI"""
    return QueryClient(engine)
