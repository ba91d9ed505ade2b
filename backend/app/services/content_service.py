"""Content Service 도메인 서비스 레이어입니다. 뉴스/영상/매거진 생성·조회·삭제와 입력 검증을 담당합니다."""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.config import settings
from app.models.user import User
from app.services import category_service, comment_service, entity_store, moderation_service, version_service
from app.services.content_kinds import ContentKind
from app.services.locks import entity_lock
from app.utils import type_tags
from app.utils.errors import ForbiddenError, ValidationError
from app.utils.helpers import is_valid_year, month_rank, utcnow
from app.utils.permissions import can_create_content, can_manage_versions

logger = logging.getLogger(__name__)


def prepare_fields(db: Session, kind: ContentKind, payload: Dict[str, Any]) -> Dict[str, Any]:
    """쓰기 전에 분류 태그를 정규화하고 필수 항목/참조 무결성을 검증한다.

    payload에 없는 키는 건드리지 않고, 명시적으로 null이 온 태그는 비우는 값(None)으로 남긴다.
    """
    data = dict(payload)
    for tag in type_tags.TAG_FIELDS:
        if tag not in data:
            continue
        normalized = type_tags.normalize(tag, data[tag])
        if normalized == type_tags.INVALID:
            raise ValidationError(type_tags.invalid_message(tag))
        data[tag] = normalized

    for field in kind.required:
        if field not in data:
            continue
        value = data[field]
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"{field}은(는) 필수 항목입니다.")

    if kind.references_category and "category_id" in data:
        category_service.ensure_category_exists(db, data["category_id"])

    if kind.has_publication and data.get("published_year") is not None:
        if not is_valid_year(data["published_year"]):
            raise ValidationError("published_year는 YYYY 형식이어야 합니다. (예: 2025)")
        data["published_year"] = str(data["published_year"]).strip()

    return data


def create_entity(db: Session, kind: ContentKind, data: BaseModel, current_user: User) -> Any:
    if not can_create_content(current_user):
        raise ForbiddenError(f"{kind.label} 작성 권한이 없습니다.")
    fields = prepare_fields(db, kind, data.model_dump())
    entity = kind.model(**fields, created_by=current_user.user_id, last_updated=utcnow())
    moderation_service.apply_edit_status(entity, current_user)
    entity = entity_store.save(db, entity)
    logger.info(
        "[content] %s #%s created by user %s (status=%s)",
        kind.entity_type, getattr(entity, kind.pk), current_user.user_id, entity.status,
    )
    return entity


def get_entity(db: Session, kind: ContentKind, entity_id: int) -> Any:
    return entity_store.get_entity(db, kind, entity_id)


def list_entities(
    db: Session,
    kind: ContentKind,
    *,
    status: Optional[str] = None,
    news_type: Optional[str] = None,
    magazine_type: Optional[str] = None,
    category_id: Optional[int] = None,
    q: Optional[str] = None,
    limit: Optional[int] = None,
) -> List[Any]:
    query = db.query(kind.model)
    if status:
        if status not in moderation_service.STATUSES:
            raise ValidationError("status는 pending, approved, rejected 중 하나여야 합니다.")
        query = query.filter(kind.model.status == status)
    for tag, raw in ((type_tags.NEWS_TYPE, news_type), (type_tags.MAGAZINE_TYPE, magazine_type)):
        if raw is None:
            continue
        normalized = type_tags.normalize(tag, raw)
        if normalized == type_tags.INVALID:
            raise ValidationError(type_tags.invalid_message(tag))
        if normalized is not None:
            query = query.filter(getattr(kind.model, tag) == normalized)
    if category_id is not None:
        if not kind.references_category:
            raise ValidationError(f"{kind.label}은(는) 카테고리로 조회할 수 없습니다.")
        category_service.get_category(db, category_id)
        query = query.filter(kind.model.category_id == category_id)
    if q and q.strip():
        query = query.filter(kind.model.title.ilike(f"%{q.strip()}%"))
    return (
        query.order_by(kind.model.created_at.desc(), kind.pk_column.desc())
        .limit(limit or settings.DEFAULT_LIST_LIMIT)
        .all()
    )


def list_latest(db: Session, kind: ContentKind) -> List[Any]:
    """방송 중(is_live)인 최신 콘텐츠만 최신 등록 순으로 돌려준다."""
    return (
        db.query(kind.model)
        .filter(kind.model.is_live.is_(True))
        .order_by(kind.model.created_at.desc(), kind.pk_column.desc())
        .limit(settings.LATEST_LIST_LIMIT)
        .all()
    )


def count_entities(db: Session, kind: ContentKind) -> int:
    return db.query(kind.model).count()


def list_by_year(db: Session, kind: ContentKind, year: str) -> List[Any]:
    if not is_valid_year(year):
        raise ValidationError("연도 형식이 올바르지 않습니다. YYYY 형식을 사용하세요. (예: 2025)")
    rows = db.query(kind.model).filter(kind.model.published_year == year.strip()).all()
    # 1월→12월 순, 같은 달이면 최신 등록 순
    rows.sort(key=lambda row: getattr(row, kind.pk), reverse=True)
    rows.sort(key=lambda row: month_rank(row.published_month))
    return rows


def delete_entity(db: Session, kind: ContentKind, entity_id: int, current_user: User):
    if not can_manage_versions(current_user):
        raise ForbiddenError(f"{kind.label} 삭제는 관리자/모더레이터만 가능합니다.")
    with entity_lock(kind.entity_type, entity_id):
        entity = entity_store.get_entity(db, kind, entity_id)
        # 원장은 콘텐츠에 종속되므로 콘텐츠와 같은 트랜잭션에서 함께 지운다.
        removed = version_service.delete_all_versions(db, kind, entity_id)
        if kind.has_comments:
            comment_service.delete_all_comments(db, kind, entity_id)
        db.delete(entity)
        db.commit()
    logger.info(
        "[content] %s #%s deleted by user %s (%s versions removed)",
        kind.entity_type, entity_id, current_user.user_id, removed,
    )
