"""뉴스/영상/매거진 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import Optional, List
from datetime import date, datetime


class ContentTagsIn(BaseModel):
    # 별칭 허용을 위해 문자열 그대로 받고, 정규화는 서비스 레이어에서 수행한다.
    magazine_type: Optional[str] = None
    news_type: Optional[str] = None


class ContentStateOut(BaseModel):
    magazine_type: Optional[str] = None
    news_type: Optional[str] = None
    status: str
    created_by: int
    approved_by: Optional[int] = None
    approved_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    last_updated: Optional[datetime] = None


# --- News ---

class NewsCreate(ContentTagsIn):
    title: str
    description: str
    category_id: int
    news_image: Optional[str] = None
    tags: Optional[List[str]] = None
    author: Optional[str] = None
    is_live: bool = True


class NewsUpdate(ContentTagsIn):
    title: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[int] = None
    news_image: Optional[str] = None
    tags: Optional[List[str]] = None
    author: Optional[str] = None
    is_live: Optional[bool] = None


class NewsOut(ContentStateOut):
    news_id: int
    title: str
    description: str
    category_id: int
    news_image: Optional[str] = None
    tags: Optional[List[str]] = None
    author: Optional[str] = None
    is_live: Optional[bool] = None

    model_config = {"from_attributes": True}


# --- Video / LongVideo ---

class VideoCreate(ContentTagsIn):
    title: str
    description: str
    thumbnail: str
    video_url: str
    category_id: int
    video_duration: Optional[int] = None


class VideoUpdate(ContentTagsIn):
    title: Optional[str] = None
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    video_url: Optional[str] = None
    category_id: Optional[int] = None
    video_duration: Optional[int] = None


class VideoFieldsOut(ContentStateOut):
    title: str
    description: str
    thumbnail: str
    video_url: str
    category_id: int
    video_duration: Optional[int] = None


class VideoOut(VideoFieldsOut):
    video_id: int

    model_config = {"from_attributes": True}


class LongVideoOut(VideoFieldsOut):
    long_video_id: int

    model_config = {"from_attributes": True}


# --- Magazine (두 에디션 공용) ---

class MagazineCreate(ContentTagsIn):
    title: str
    description: str
    published_date: Optional[date] = None
    published_month: Optional[str] = None
    published_year: Optional[str] = None
    magazine_thumbnail: Optional[str] = None
    magazine_pdf: Optional[str] = None
    edition_number: Optional[str] = None


class MagazineUpdate(ContentTagsIn):
    title: Optional[str] = None
    description: Optional[str] = None
    published_date: Optional[date] = None
    published_month: Optional[str] = None
    published_year: Optional[str] = None
    magazine_thumbnail: Optional[str] = None
    magazine_pdf: Optional[str] = None
    edition_number: Optional[str] = None


class MagazineOut(ContentStateOut):
    magazine_id: int
    title: str
    description: str
    published_date: Optional[date] = None
    published_month: Optional[str] = None
    published_year: Optional[str] = None
    magazine_thumbnail: Optional[str] = None
    magazine_pdf: Optional[str] = None
    edition_number: Optional[str] = None

    model_config = {"from_attributes": True}


class ContentCountOut(BaseModel):
    total: int
