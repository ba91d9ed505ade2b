"""Comment Service 도메인 서비스 레이어입니다. 뉴스/영상 댓글 작성·조회·삭제 규칙을 담당합니다."""

import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.models.comment import ContentComment
from app.models.user import User
from app.schemas.comment import CommentCreate
from app.services import entity_store
from app.services.content_kinds import ContentKind
from app.utils.errors import ForbiddenError, NotFoundError, ValidationError
from app.utils.permissions import EDITORIAL_ROLES

logger = logging.getLogger(__name__)


def _comments(db: Session, kind: ContentKind, entity_id: int):
    return db.query(ContentComment).filter(
        ContentComment.entity_type == kind.entity_type,
        ContentComment.entity_id == entity_id,
    )


def list_comments(db: Session, kind: ContentKind, entity_id: int) -> List[ContentComment]:
    entity_store.get_entity(db, kind, entity_id)
    return _comments(db, kind, entity_id).order_by(ContentComment.comment_id.asc()).all()


def add_comment(db: Session, kind: ContentKind, entity_id: int, data: CommentCreate, current_user: User) -> ContentComment:
    entity_store.get_entity(db, kind, entity_id)
    text = (data.comment or "").strip()
    if not text:
        raise ValidationError("댓글 내용은 비워둘 수 없습니다.")
    row = ContentComment(
        entity_type=kind.entity_type,
        entity_id=entity_id,
        user_id=current_user.user_id,
        comment=text,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("[comments] %s #%s comment %s added by user %s", kind.entity_type, entity_id, row.comment_id, current_user.user_id)
    return row


def delete_comment(db: Session, kind: ContentKind, entity_id: int, comment_id: int, current_user: User):
    row = _comments(db, kind, entity_id).filter(ContentComment.comment_id == comment_id).first()
    if not row:
        raise NotFoundError("댓글을 찾을 수 없습니다.")
    # 작성자 본인 또는 관리자/모더레이터만 삭제할 수 있다.
    if row.user_id != current_user.user_id and current_user.role not in EDITORIAL_ROLES:
        raise ForbiddenError("본인이 작성한 댓글만 삭제할 수 있습니다.")
    db.delete(row)
    db.commit()
    logger.info("[comments] %s #%s comment %s deleted by user %s", kind.entity_type, entity_id, comment_id, current_user.user_id)


def delete_all_comments(db: Session, kind: ContentKind, entity_id: int) -> int:
    return _comments(db, kind, entity_id).delete(synchronize_session=False)


def to_response(row: ContentComment) -> Dict[str, Any]:
    author = row.author
    return {
        "comment_id": row.comment_id,
        "entity_type": row.entity_type,
        "entity_id": row.entity_id,
        "user_id": row.user_id,
        "comment": row.comment,
        "author_name": author.display_name if author else None,
        "created_at": row.created_at,
    }
