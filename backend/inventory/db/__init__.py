"""Database package"""

from inventory.db.session import AsyncSessionLocal, engine, get_db, init_models
from inventory.models.base import Base

__all__ = ["Base", "AsyncSessionLocal", "engine", "get_db", "init_models"]
