"""Category Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다."""

from typing import List

from sqlalchemy.orm import Session

from app.models.category import Category
from app.models.user import User
from app.schemas.category import CategoryCreate, CategoryUpdate
from app.services import moderation_service
from app.utils.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from app.utils.helpers import utcnow
from app.utils.permissions import can_approve, can_create_content, can_manage_versions


def list_categories(db: Session) -> List[Category]:
    return db.query(Category).order_by(Category.created_at.desc(), Category.category_id.desc()).all()


def get_category(db: Session, category_id: int) -> Category:
    row = db.query(Category).filter(Category.category_id == category_id).first()
    if not row:
        raise NotFoundError("카테고리를 찾을 수 없습니다.")
    return row


def ensure_category_exists(db: Session, category_id: int) -> None:
    if not db.query(Category.category_id).filter(Category.category_id == category_id).first():
        raise ValidationError("유효하지 않은 카테고리 ID 입니다.")


def create_category(db: Session, data: CategoryCreate, current_user: User) -> Category:
    if not can_create_content(current_user):
        raise ForbiddenError("카테고리 생성 권한이 없습니다.")
    name = data.name.strip()
    if not name:
        raise ValidationError("카테고리 이름은 비워둘 수 없습니다.")
    if db.query(Category.category_id).filter(Category.name == name).first():
        raise ConflictError("이미 존재하는 카테고리 이름입니다.")
    row = Category(
        name=name,
        description=data.description,
        created_by=current_user.user_id,
        status=moderation_service.initial_status(current_user),
        last_updated=utcnow(),
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def update_category(db: Session, category_id: int, data: CategoryUpdate, current_user: User) -> Category:
    if not can_manage_versions(current_user):
        raise ForbiddenError("카테고리 수정은 관리자/모더레이터만 가능합니다.")
    row = get_category(db, category_id)
    payload = data.model_dump(exclude_unset=True)
    if "name" in payload:
        name = (payload["name"] or "").strip()
        if not name:
            raise ValidationError("카테고리 이름은 비워둘 수 없습니다.")
        duplicate = (
            db.query(Category.category_id)
            .filter(Category.name == name, Category.category_id != category_id)
            .first()
        )
        if duplicate:
            raise ConflictError("이미 존재하는 카테고리 이름입니다.")
        row.name = name
    if "description" in payload:
        row.description = payload["description"]
    # 모더레이터가 고치면 다시 관리자 검수를 받는다.
    row.status = moderation_service.initial_status(current_user)
    row.last_updated = utcnow()
    db.commit()
    db.refresh(row)
    return row


def approve_category(db: Session, category_id: int, current_user: User) -> Category:
    if not can_approve(current_user):
        raise ForbiddenError("카테고리 승인은 관리자만 가능합니다.")
    row = get_category(db, category_id)
    row.status = moderation_service.APPROVED
    row.last_updated = utcnow()
    db.commit()
    db.refresh(row)
    return row


def delete_category(db: Session, category_id: int, current_user: User):
    if not can_approve(current_user):
        raise ForbiddenError("카테고리 삭제는 관리자만 가능합니다.")
    row = get_category(db, category_id)
    db.delete(row)
    db.commit()
