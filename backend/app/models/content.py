"""버전 관리 대상 콘텐츠(뉴스/영상/롱폼 영상/매거진 2종) SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Boolean, JSON, ForeignKey, Index
from sqlalchemy.orm import declared_attr
from sqlalchemy.sql import func

from app.database import Base


class ContentMixin:
    """다섯 종류 콘텐츠가 공유하는 분류 태그/검수 상태/작성자 컬럼."""

    magazine_type = Column(String(20))  # magazine/magazine2
    news_type = Column(String(20))  # statenews/districtnews/specialnews
    status = Column(String(20), nullable=False, default="pending")  # pending/approved/rejected
    approved_at = Column(DateTime)
    created_at = Column(DateTime, server_default=func.now())
    last_updated = Column(DateTime)

    @declared_attr
    def created_by(cls):
        return Column(Integer, ForeignKey("users.user_id"), nullable=False)

    @declared_attr
    def approved_by(cls):
        return Column(Integer, ForeignKey("users.user_id"))


class News(ContentMixin, Base):
    __tablename__ = "news"

    news_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=False)
    news_image = Column(String(500))
    category_id = Column(Integer, ForeignKey("categories.category_id"), nullable=False)
    tags = Column(JSON)
    author = Column(String(100))
    is_live = Column(Boolean, default=True)

    __table_args__ = (
        Index("idx_news_status", "status", "created_at"),
    )


class Video(ContentMixin, Base):
    __tablename__ = "videos"

    video_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=False)
    thumbnail = Column(String(500), nullable=False)
    video_url = Column(String(500), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.category_id"), nullable=False)
    video_duration = Column(Integer)  # seconds


class LongVideo(ContentMixin, Base):
    __tablename__ = "long_videos"

    long_video_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=False)
    thumbnail = Column(String(500), nullable=False)
    video_url = Column(String(500), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.category_id"), nullable=False)
    video_duration = Column(Integer)  # seconds


class Magazine(ContentMixin, Base):
    __tablename__ = "magazines"

    magazine_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=False)
    published_date = Column(Date)
    published_month = Column(String(20))
    published_year = Column(String(4))
    magazine_thumbnail = Column(String(500))
    magazine_pdf = Column(String(500))
    edition_number = Column(String(20))

    __table_args__ = (
        Index("idx_magazine_published", "published_year", "published_month"),
    )


class Magazine2(ContentMixin, Base):
    __tablename__ = "magazines2"

    magazine_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=False)
    published_date = Column(Date)
    published_month = Column(String(20))
    published_year = Column(String(4))
    magazine_thumbnail = Column(String(500))
    magazine_pdf = Column(String(500))
    edition_number = Column(String(20))

    __table_args__ = (
        Index("idx_magazine2_published", "published_year", "published_month"),
    )
