"""
Record repositories and the SQL-backed department directory.

Every database failure is logged and re-raised as StorageError so the API
layer reports a generic failure. Nothing here retries.
"""

from __future__ import annotations

import hashlib
import os
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, List, Optional, Sequence

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vitalnexus.db.models import Article, Doctor, User
from vitalnexus.utils import RecordNotFoundError, StorageError, get_logger

logger = get_logger(__name__)

_PBKDF2_ITERATIONS = 260_000


def hash_password(password: str, *, salt: Optional[bytes] = None) -> str:
    """Return "pbkdf2_sha256$<iterations>$<salt>$<digest>" for `password`."""
    salt = salt or os.urandom(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return f"pbkdf2_sha256${_PBKDF2_ITERATIONS}${salt.hex()}${digest.hex()}"


@contextmanager
def _storage_guard(db: Session, operation: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Storage operation '{operation}' failed: {exc}")
        raise StorageError(operation=operation) from exc


class DoctorRepository:
    """CRUD over doctor records."""

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Doctor]:
        with _storage_guard(self.db, "list_doctors"):
            return list(self.db.scalars(select(Doctor).order_by(Doctor.doctor_id)))

    def create(self, name: str, email: Optional[str], department: Optional[str]) -> Doctor:
        with _storage_guard(self.db, "create_doctor"):
            doctor = Doctor(name=name, email=email, department=department)
            self.db.add(doctor)
            self.db.commit()
            self.db.refresh(doctor)
        logger.info(f"Created doctor {doctor.doctor_id} ({department})")
        return doctor

    def update(
        self,
        doctor_id: int,
        name: str,
        email: Optional[str],
        department: Optional[str],
    ) -> Doctor:
        """Replace name / email / department and stamp last_login."""
        with _storage_guard(self.db, "update_doctor"):
            doctor = self.db.get(Doctor, doctor_id)
            if doctor is None:
                raise RecordNotFoundError("doctor", doctor_id)
            doctor.name = name
            doctor.email = email
            doctor.department = department
            doctor.last_login = datetime.now(timezone.utc)
            self.db.commit()
            self.db.refresh(doctor)
        return doctor

    def delete(self, doctor_id: int) -> None:
        with _storage_guard(self.db, "delete_doctor"):
            doctor = self.db.get(Doctor, doctor_id)
            if doctor is None:
                raise RecordNotFoundError("doctor", doctor_id)
            self.db.delete(doctor)
            self.db.commit()
        logger.info(f"Deleted doctor {doctor_id}")


class UserRepository:
    """User registration and profile updates."""

    def __init__(self, db: Session):
        self.db = db

    def register(self, username: str, email: Optional[str], password: str) -> User:
        with _storage_guard(self.db, "register_user"):
            user = User(username=username, email=email, password_hash=hash_password(password))
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        logger.info(f"Registered user {user.user_id}")
        return user

    def update_profile(
        self,
        user_id: int,
        gender: Optional[str],
        age: Optional[int],
        bmi: Optional[float],
    ) -> User:
        with _storage_guard(self.db, "update_user"):
            user = self.db.get(User, user_id)
            if user is None:
                raise RecordNotFoundError("user", user_id)
            user.gender = gender
            user.age = age
            user.bmi = bmi
            self.db.commit()
            self.db.refresh(user)
        return user


class ArticleRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_latest(self) -> List[Article]:
        """All articles, newest first."""
        with _storage_guard(self.db, "list_articles"):
            stmt = select(Article).order_by(desc(Article.created_on), desc(Article.article_id))
            return list(self.db.scalars(stmt))


class SqlDepartmentDirectory:
    """DepartmentDirectory backed by the doctors table."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_departments(self, departments: Sequence[str]) -> List[dict]:
        with _storage_guard(self.db, "find_doctors_by_department"):
            stmt = (
                select(Doctor)
                .where(Doctor.department.in_(list(departments)))
                .order_by(Doctor.doctor_id)
            )
            return [doctor.to_dict() for doctor in self.db.scalars(stmt)]


__all__ = [
    "hash_password",
    "DoctorRepository",
    "UserRepository",
    "ArticleRepository",
    "SqlDepartmentDirectory",
]
