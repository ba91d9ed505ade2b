"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from app.models.user import User
from app.models.category import Category
from app.models.content import News, Video, LongVideo, Magazine, Magazine2
from app.models.content_version import ContentVersion
from app.models.comment import ContentComment

__all__ = [
    "User",
    "Category",
    "News", "Video", "LongVideo", "Magazine", "Magazine2",
    "ContentVersion",
    "ContentComment",
]
