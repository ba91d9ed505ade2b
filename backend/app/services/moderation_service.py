"""콘텐츠 검수 상태(pending/approved) 전이 규칙을 담당하는 도메인 서비스입니다."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from app.models.user import User
from app.services import entity_store
from app.services.content_kinds import ContentKind
from app.services.locks import entity_lock
from app.utils.errors import ForbiddenError
from app.utils.helpers import utcnow
from app.utils.permissions import can_approve, is_admin

logger = logging.getLogger(__name__)

PENDING = "pending"
APPROVED = "approved"
REJECTED = "rejected"  # 스키마상 허용되지만 현재 어떤 전이도 이 상태로 가지 않는다.

STATUSES = (PENDING, APPROVED, REJECTED)


def status_for(actor: User) -> str:
    # 생성/수정 모두 같은 규칙: 관리자가 손댄 콘텐츠만 바로 승인 상태가 된다.
    return APPROVED if is_admin(actor) else PENDING


def initial_status(actor: User) -> str:
    return status_for(actor)


def apply_edit_status(entity: Any, actor: User) -> None:
    """생성/수정한 사람 기준으로 상태를 다시 계산한다. pending으로 내려가면 승인 정보도 비운다."""
    entity.status = status_for(actor)
    if entity.status == APPROVED:
        entity.approved_by = actor.user_id
        entity.approved_at = utcnow()
    else:
        entity.approved_by = None
        entity.approved_at = None


def approve(db: Session, kind: ContentKind, entity_id: int, actor: User) -> Any:
    if not can_approve(actor):
        raise ForbiddenError(f"{kind.label} 승인은 관리자만 가능합니다.")
    with entity_lock(kind.entity_type, entity_id):
        entity = entity_store.get_entity(db, kind, entity_id)
        if entity.status == APPROVED:
            # 이미 승인된 콘텐츠의 재승인은 모든 종류에서 변경 없이 그대로 돌려준다.
            return entity
        entity.status = APPROVED
        entity.approved_by = actor.user_id
        entity.approved_at = utcnow()
        entity.last_updated = entity.approved_at
        db.commit()
        db.refresh(entity)
    logger.info("[moderation] %s #%s approved by user %s", kind.entity_type, entity_id, actor.user_id)
    return entity
