"""콘텐츠 버전 원장 저장/조회/번호 재정렬 공용 기능을 제공하는 데이터 접근 서비스입니다."""

import json
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import Date, DateTime, func
from sqlalchemy.orm import Session

from app.models.content_version import ContentVersion
from app.services.content_kinds import ContentKind
from app.utils.errors import ValidationError


def _ledger(db: Session, kind: ContentKind, entity_id: int):
    return db.query(ContentVersion).filter(
        ContentVersion.entity_type == kind.entity_type,
        ContentVersion.entity_id == entity_id,
    )


def count_versions(db: Session, kind: ContentKind, entity_id: int) -> int:
    return _ledger(db, kind, entity_id).count()


def next_version_no(db: Session, kind: ContentKind, entity_id: int) -> int:
    # 번호가 항상 1..N으로 촘촘하므로 max + 1 == count + 1 이다.
    current_max = (
        db.query(func.max(ContentVersion.version_no))
        .filter(
            ContentVersion.entity_type == kind.entity_type,
            ContentVersion.entity_id == entity_id,
        )
        .scalar()
    )
    return (current_max or 0) + 1


def find_version(db: Session, kind: ContentKind, entity_id: int, version_no: int) -> Optional[ContentVersion]:
    return _ledger(db, kind, entity_id).filter(ContentVersion.version_no == version_no).first()


def list_versions(db: Session, kind: ContentKind, entity_id: int, *, latest_first: bool = True) -> List[ContentVersion]:
    order = ContentVersion.version_no.desc() if latest_first else ContentVersion.version_no.asc()
    return _ledger(db, kind, entity_id).order_by(order).all()


def delete_all_versions(db: Session, kind: ContentKind, entity_id: int) -> int:
    return _ledger(db, kind, entity_id).delete(synchronize_session=False)


def append_version(
    db: Session,
    kind: ContentKind,
    entity: Any,
    *,
    version_no: int,
    updated_by: int,
) -> ContentVersion:
    """편집 직전 상태를 원장에 기록한다. 커밋은 호출자가 편집과 함께 수행한다."""
    row = ContentVersion(
        entity_type=kind.entity_type,
        entity_id=getattr(entity, kind.pk),
        version_no=version_no,
        snapshot=json.dumps(take_snapshot(kind, entity), ensure_ascii=False),
        updated_by=updated_by,
    )
    db.add(row)
    db.flush()
    return row


def renumber_versions(db: Session, kind: ContentKind, entity_id: int) -> int:
    rows = list_versions(db, kind, entity_id, latest_first=False)
    for index, row in enumerate(rows, start=1):
        if row.version_no != index:
            # 오름차순으로 한 건씩 내려야 유니크 제약에 걸리지 않는다.
            row.version_no = index
            db.flush()
    return len(rows)


def _to_json(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return list(value)
    return value


def take_snapshot(kind: ContentKind, entity: Any) -> Dict[str, Any]:
    return {field: _to_json(getattr(entity, field)) for field in kind.snapshot_fields}


def _from_json(column, value: Any) -> Any:
    if value is None:
        return None
    if isinstance(column.type, DateTime):
        return datetime.fromisoformat(value)
    if isinstance(column.type, Date):
        return date.fromisoformat(value[:10])
    return value


def _column_default(column) -> Any:
    if column.default is not None and column.default.is_scalar:
        return column.default.arg
    return None


def restore_snapshot(kind: ContentKind, entity: Any, snapshot: Dict[str, Any]) -> None:
    """스냅샷으로 필드를 통째로 덮어쓴다. 스냅샷에 없는 필드는 컬럼 기본값(없으면 NULL)으로 초기화한다."""
    columns = kind.model.__table__.columns
    restored = {}
    for field in kind.restorable_fields:
        column = columns[field]
        if field in snapshot:
            restored[field] = _from_json(column, snapshot[field])
        else:
            restored[field] = _column_default(column)
    missing = [field for field in kind.required if restored.get(field) is None]
    if missing:
        raise ValidationError(f"스냅샷에 필수 항목이 없어 복원할 수 없습니다: {', '.join(missing)}")
    for field, value in restored.items():
        setattr(entity, field, value)


def parse_snapshot(row: ContentVersion) -> Dict[str, Any]:
    try:
        return json.loads(row.snapshot or "{}")
    except json.JSONDecodeError:
        return {}


def to_response(row: ContentVersion) -> Dict[str, Any]:
    editor = row.editor
    return {
        "version_id": row.version_id,
        "entity_type": row.entity_type,
        "entity_id": row.entity_id,
        "version_no": row.version_no,
        "snapshot": parse_snapshot(row),
        "updated_by": row.updated_by,
        "updated_by_name": editor.display_name if editor else None,
        "updated_by_email": editor.email if editor else None,
        "updated_at": row.updated_at,
    }
