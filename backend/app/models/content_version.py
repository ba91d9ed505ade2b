"""뉴스/영상/매거진 편집 직전 상태를 보관하는 버전 원장 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base


class ContentVersion(Base):
    __tablename__ = "content_version"

    version_id = Column(Integer, primary_key=True, autoincrement=True)
    entity_type = Column(String(30), nullable=False)  # news/video/long_video/magazine/magazine2
    entity_id = Column(Integer, nullable=False)
    version_no = Column(Integer, nullable=False)
    snapshot = Column(Text, nullable=False)  # JSON string
    updated_by = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    updated_at = Column(DateTime, server_default=func.now())

    editor = relationship("User")

    __table_args__ = (
        # 동시 편집 시 같은 번호가 두 번 할당되는 것을 DB 수준에서 막는다.
        UniqueConstraint("entity_type", "entity_id", "version_no", name="uq_content_version_entity_no"),
    )
