"""뉴스/영상 댓글 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base


class ContentComment(Base):
    __tablename__ = "content_comment"

    comment_id = Column(Integer, primary_key=True, autoincrement=True)
    entity_type = Column(String(30), nullable=False)  # news/video/long_video
    entity_id = Column(Integer, nullable=False)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    comment = Column(Text, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    author = relationship("User")

    __table_args__ = (
        Index("idx_content_comment_entity", "entity_type", "entity_id"),
    )
