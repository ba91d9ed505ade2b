"""Permissions 관련 공용 유틸리티 헬퍼입니다."""

from typing import Any

from app.models.user import User


ADMIN = "admin"
MODERATOR = "moderator"
CONTENT = "content"
USER = "user"

ALL_ROLES = (ADMIN, MODERATOR, CONTENT, USER)
EDITORIAL_ROLES = (ADMIN, MODERATOR)
AUTHOR_ROLES = (ADMIN, MODERATOR, CONTENT)


def is_admin(user: User) -> bool:
    return user.role == ADMIN


def is_owner(user: User, entity: Any) -> bool:
    return getattr(entity, "created_by", None) == user.user_id


def can_create_content(user: User) -> bool:
    return user.role in AUTHOR_ROLES


def can_edit_content(user: User, entity: Any) -> bool:
    # 관리자/모더레이터는 모든 콘텐츠를, 그 외에는 본인이 작성한 콘텐츠만 수정할 수 있다.
    return user.role in EDITORIAL_ROLES or is_owner(user, entity)


def can_approve(user: User) -> bool:
    return user.role == ADMIN


def can_manage_versions(user: User) -> bool:
    return user.role in EDITORIAL_ROLES
