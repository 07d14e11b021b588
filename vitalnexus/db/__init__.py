"""
Persistence Layer

SQLAlchemy models, session wiring and repositories for the records served
by the API. The recommendation core only sees SqlDepartmentDirectory.
"""
from .models import Base, Doctor, User, Article
from .session import engine_for_url, init_db, get_db
from .repository import (
    hash_password,
    DoctorRepository,
    UserRepository,
    ArticleRepository,
    SqlDepartmentDirectory,
)

__all__ = [
    "Base",
    "Doctor",
    "User",
    "Article",
    "engine_for_url",
    "init_db",
    "get_db",
    "hash_password",
    "DoctorRepository",
    "UserRepository",
    "ArticleRepository",
    "SqlDepartmentDirectory",
]
