"""SQLAlchemy models for doctors, users and articles."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Doctor(Base):
    __tablename__ = "doctors"

    doctor_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    # Matched against DEPARTMENT_MAP values by the consultation lookup.
    department = Column(String(255), nullable=True, index=True)
    created_on = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    last_login = Column(DateTime(timezone=True), nullable=True)

    def to_dict(self) -> dict:
        return {
            "doctor_id": self.doctor_id,
            "name": self.name,
            "email": self.email,
            "department": self.department,
            "created_on": self.created_on.isoformat() if self.created_on else None,
            "last_login": self.last_login.isoformat() if self.last_login else None,
        }


class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(150), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=True)
    # NOTE: salted PBKDF2 digest, never the raw password.
    password_hash = Column(String(255), nullable=False)
    gender = Column(String(32), nullable=True)
    age = Column(Integer, nullable=True)
    bmi = Column(Float, nullable=True)
    created_on = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "username": self.username,
            "email": self.email,
            "gender": self.gender,
            "age": self.age,
            "bmi": self.bmi,
            "created_on": self.created_on.isoformat() if self.created_on else None,
        }


class Article(Base):
    __tablename__ = "articles"

    article_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=True)
    author = Column(String(255), nullable=True)
    created_on = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)

    def to_dict(self) -> dict:
        return {
            "article_id": self.article_id,
            "title": self.title,
            "content": self.content,
            "author": self.author,
            "created_on": self.created_on.isoformat() if self.created_on else None,
        }


__all__ = ["Base", "Doctor", "User", "Article"]
