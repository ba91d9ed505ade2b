"""User 도메인의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.sql import func
from app.database import Base


class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(100), unique=True, nullable=False)
    display_name = Column(String(100))
    phone_number = Column(String(20), unique=True)
    profile_image = Column(String(500))
    role = Column(String(20), nullable=False, default="user")  # admin/moderator/content/user
    is_blocked = Column(Boolean, default=False)
    created_at = Column(DateTime, server_default=func.now())
    last_logged_in = Column(DateTime)
