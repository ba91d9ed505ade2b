"""User Service 도메인 서비스 레이어입니다. 사용자 등록과 차단/해제 규칙을 캡슐화합니다."""

import logging

from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.user import UserCreate
from app.utils.errors import ConflictError, NotFoundError, ValidationError
from app.utils.permissions import ADMIN, ALL_ROLES

logger = logging.getLogger(__name__)


def _normalize_role_or_raise(role: str) -> str:
    normalized = str(role or "").strip().lower()
    if normalized not in ALL_ROLES:
        raise ValidationError("유효하지 않은 역할입니다.")
    return normalized


def list_users(db: Session, include_blocked: bool = True):
    q = db.query(User)
    if not include_blocked:
        q = q.filter(User.is_blocked == False)  # noqa: E712
    return q.order_by(User.user_id).all()


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.user_id == user_id).first()
    if not user:
        raise NotFoundError("사용자를 찾을 수 없습니다.")
    return user


def create_user(db: Session, data: UserCreate) -> User:
    role = _normalize_role_or_raise(data.role)
    email = data.email.strip().lower()
    if not email:
        raise ValidationError("이메일은 필수 항목입니다.")
    if db.query(User).filter(User.email == email).first():
        raise ConflictError("이미 등록된 이메일입니다.")
    if data.phone_number and db.query(User).filter(User.phone_number == data.phone_number).first():
        raise ConflictError("이미 등록된 전화번호입니다.")

    user = User(
        email=email,
        display_name=data.display_name,
        phone_number=data.phone_number,
        profile_image=data.profile_image,
        role=role,
        is_blocked=False,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("[users] user %s created (role=%s)", user.user_id, role)
    return user


def set_blocked(db: Session, user_id: int, is_blocked: bool, current_user: User) -> User:
    user = get_user(db, user_id)
    if user.user_id == current_user.user_id and is_blocked:
        raise ValidationError("자기 자신은 차단할 수 없습니다.")
    if is_blocked and user.role == ADMIN:
        active_admins = (
            db.query(User).filter(User.role == ADMIN, User.is_blocked == False).count()  # noqa: E712
        )
        if active_admins <= 1:
            raise ValidationError("마지막 관리자 계정은 차단할 수 없습니다.")
    user.is_blocked = is_blocked
    db.commit()
    db.refresh(user)
    logger.info("[users] user %s %s by user %s", user_id, "blocked" if is_blocked else "unblocked", current_user.user_id)
    return user
