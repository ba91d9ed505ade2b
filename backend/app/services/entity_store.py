"""콘텐츠 종류별 엔티티 조회/저장 데이터 접근 함수입니다."""

from typing import Any, Optional

from sqlalchemy.orm import Session

from app.services.content_kinds import ContentKind
from app.utils.errors import NotFoundError


def find_by_id(db: Session, kind: ContentKind, entity_id: int) -> Optional[Any]:
    return db.query(kind.model).filter(kind.pk_column == entity_id).first()


def get_entity(db: Session, kind: ContentKind, entity_id: int) -> Any:
    entity = find_by_id(db, kind, entity_id)
    if not entity:
        raise NotFoundError(f"{kind.label}을(를) 찾을 수 없습니다.")
    return entity


def save(db: Session, entity: Any) -> Any:
    db.add(entity)
    db.commit()
    db.refresh(entity)
    return entity
