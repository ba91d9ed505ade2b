"""콘텐츠 편집 이력(스냅샷) 기록, 되돌리기, 버전 삭제/재번호를 조율하는 버전 관리 엔진입니다.

모든 다단계 작업(스냅샷→수정, 복원→이력 삭제, 삭제→재번호)은 콘텐츠 단위 잠금 안에서
하나의 DB 트랜잭션으로 커밋됩니다. 중간에 실패하면 전체가 롤백되어 원장에 고아 스냅샷이나
지워지지 않은 이력이 남지 않습니다.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import settings
from app.models.content_version import ContentVersion
from app.models.user import User
from app.services import content_service, entity_store, moderation_service, version_service
from app.services.content_kinds import ContentKind
from app.services.locks import entity_lock
from app.utils.errors import ForbiddenError, NotFoundError, VersionConflictError
from app.utils.helpers import utcnow
from app.utils.permissions import can_edit_content

logger = logging.getLogger(__name__)


def apply_edit(
    db: Session,
    kind: ContentKind,
    entity_id: int,
    patch: Dict[str, Any],
    current_user: User,
) -> Any:
    """편집 직전 상태를 다음 버전으로 기록한 뒤 patch에 들어 있는 필드만 반영한다."""
    attempts = max(1, settings.VERSION_ALLOCATION_RETRIES)
    with entity_lock(kind.entity_type, entity_id):
        for attempt in range(1, attempts + 1):
            entity = entity_store.get_entity(db, kind, entity_id)
            if not can_edit_content(current_user, entity):
                raise ForbiddenError(f"{kind.label} 수정 권한이 없습니다.")
            changes = content_service.prepare_fields(db, kind, patch)

            version_no = version_service.next_version_no(db, kind, entity_id)
            try:
                version_service.append_version(
                    db, kind, entity, version_no=version_no, updated_by=current_user.user_id
                )
            except IntegrityError:
                # 다른 프로세스가 같은 번호를 먼저 기록했다. 최신 상태로 다시 읽어 재할당한다.
                db.rollback()
                logger.warning(
                    "[versioning] %s #%s version %s collided (attempt %s/%s)",
                    kind.entity_type, entity_id, version_no, attempt, attempts,
                )
                continue

            try:
                for field, value in changes.items():
                    setattr(entity, field, value)
                moderation_service.apply_edit_status(entity, current_user)
                entity.last_updated = utcnow()
                db.commit()
            except Exception:
                db.rollback()
                raise
            db.refresh(entity)
            logger.info(
                "[versioning] %s #%s edited by user %s, snapshot saved as v%s (status=%s)",
                kind.entity_type, entity_id, current_user.user_id, version_no, entity.status,
            )
            return entity

    raise VersionConflictError(kind.entity_type, entity_id)


def revert_to_previous_version(db: Session, kind: ContentKind, entity_id: int, current_version_no: int) -> Any:
    """current_version_no를 버리고 직전 버전(current_version_no - 1)의 스냅샷으로 되돌린다.

    대상 버전 기록이 없으면(current_version_no <= 1 포함) NotFoundError.
    대상 기록은 남기고 current_version_no 기록만 삭제한다.
    """
    target_version_no = current_version_no - 1
    with entity_lock(kind.entity_type, entity_id):
        entity = entity_store.get_entity(db, kind, entity_id)
        target = version_service.find_version(db, kind, entity_id, target_version_no)
        if not target:
            raise NotFoundError(f"되돌릴 대상 버전 {target_version_no}을(를) 찾을 수 없습니다.")
        current = version_service.find_version(db, kind, entity_id, current_version_no)
        try:
            version_service.restore_snapshot(kind, entity, version_service.parse_snapshot(target))
            entity.last_updated = utcnow()
            if current:
                db.delete(current)
            db.flush()
            # 중간 버전을 되돌린 경우에도 번호가 1..N으로 촘촘하게 유지되도록 한다.
            remaining = version_service.renumber_versions(db, kind, entity_id)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(entity)
    logger.info(
        "[versioning] %s #%s reverted to v%s (removed v%s, %s versions remain)",
        kind.entity_type, entity_id, target_version_no, current_version_no, remaining,
    )
    return entity


def delete_version(db: Session, kind: ContentKind, entity_id: int, version_no: int) -> int:
    """이력 한 건을 지우고 남은 이력을 1부터 다시 번호 매긴다. 남은 이력 수를 돌려준다."""
    with entity_lock(kind.entity_type, entity_id):
        row = version_service.find_version(db, kind, entity_id, version_no)
        if not row:
            raise NotFoundError("버전을 찾을 수 없습니다.")
        try:
            db.delete(row)
            db.flush()
            remaining = version_service.renumber_versions(db, kind, entity_id)
            db.commit()
        except Exception:
            db.rollback()
            raise
    logger.info(
        "[versioning] %s #%s v%s deleted, %s versions renumbered",
        kind.entity_type, entity_id, version_no, remaining,
    )
    return remaining


def get_history(db: Session, kind: ContentKind, entity_id: int) -> List[ContentVersion]:
    rows = version_service.list_versions(db, kind, entity_id)
    if not rows:
        raise NotFoundError(f"{kind.label} 버전 이력이 없습니다.")
    return rows
