"""버전 관리 대상 콘텐츠 종류별 설명자(모델/필드/스키마) 레지스트리입니다.

뉴스/영상/롱폼 영상/매거진 2종은 모두 같은 검수·버전 흐름을 따르므로,
서비스와 라우터는 종류별 코드를 복제하지 않고 이 설명자를 받아 동작합니다.
"""

from dataclasses import dataclass
from typing import Dict, Tuple, Type

from pydantic import BaseModel

from app.models.content import News, Video, LongVideo, Magazine, Magazine2
from app.schemas.content import (
    NewsCreate, NewsUpdate, NewsOut,
    VideoCreate, VideoUpdate, VideoOut, LongVideoOut,
    MagazineCreate, MagazineUpdate, MagazineOut,
)
from app.utils.type_tags import TAG_FIELDS


@dataclass(frozen=True)
class ContentKind:
    entity_type: str
    label: str
    url_prefix: str
    model: type
    pk: str
    fields: Tuple[str, ...]
    required: Tuple[str, ...]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    out_schema: Type[BaseModel]
    references_category: bool = False
    has_publication: bool = False
    has_comments: bool = False
    has_live_flag: bool = False

    @property
    def pk_column(self):
        return getattr(self.model, self.pk)

    @property
    def restorable_fields(self) -> Tuple[str, ...]:
        # 되돌리기 시 스냅샷으로 통째로 덮어쓰는 필드
        return self.fields + TAG_FIELDS + ("status", "approved_by", "approved_at")

    @property
    def snapshot_fields(self) -> Tuple[str, ...]:
        return self.restorable_fields + ("last_updated",)


_VIDEO_FIELDS = ("title", "description", "thumbnail", "video_url", "category_id", "video_duration")
_VIDEO_REQUIRED = ("title", "description", "thumbnail", "video_url", "category_id")
_MAGAZINE_FIELDS = (
    "title", "description", "published_date", "published_month", "published_year",
    "magazine_thumbnail", "magazine_pdf", "edition_number",
)

NEWS = ContentKind(
    entity_type="news",
    label="뉴스",
    url_prefix="/api/news",
    model=News,
    pk="news_id",
    fields=("title", "description", "news_image", "category_id", "tags", "author", "is_live"),
    required=("title", "description", "category_id"),
    create_schema=NewsCreate,
    update_schema=NewsUpdate,
    out_schema=NewsOut,
    references_category=True,
    has_comments=True,
    has_live_flag=True,
)

VIDEO = ContentKind(
    entity_type="video",
    label="영상",
    url_prefix="/api/videos",
    model=Video,
    pk="video_id",
    fields=_VIDEO_FIELDS,
    required=_VIDEO_REQUIRED,
    create_schema=VideoCreate,
    update_schema=VideoUpdate,
    out_schema=VideoOut,
    references_category=True,
    has_comments=True,
)

LONG_VIDEO = ContentKind(
    entity_type="long_video",
    label="롱폼 영상",
    url_prefix="/api/long-videos",
    model=LongVideo,
    pk="long_video_id",
    fields=_VIDEO_FIELDS,
    required=_VIDEO_REQUIRED,
    create_schema=VideoCreate,
    update_schema=VideoUpdate,
    out_schema=LongVideoOut,
    references_category=True,
    has_comments=True,
)

MAGAZINE = ContentKind(
    entity_type="magazine",
    label="매거진",
    url_prefix="/api/magazines",
    model=Magazine,
    pk="magazine_id",
    fields=_MAGAZINE_FIELDS,
    required=("title", "description"),
    create_schema=MagazineCreate,
    update_schema=MagazineUpdate,
    out_schema=MagazineOut,
    has_publication=True,
)

MAGAZINE2 = ContentKind(
    entity_type="magazine2",
    label="매거진2",
    url_prefix="/api/magazines2",
    model=Magazine2,
    pk="magazine_id",
    fields=_MAGAZINE_FIELDS,
    required=("title", "description"),
    create_schema=MagazineCreate,
    update_schema=MagazineUpdate,
    out_schema=MagazineOut,
    has_publication=True,
)

KINDS: Dict[str, ContentKind] = {
    kind.entity_type: kind for kind in (NEWS, VIDEO, LONG_VIDEO, MAGAZINE, MAGAZINE2)
}
