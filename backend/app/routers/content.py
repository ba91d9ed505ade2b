"""뉴스/영상/롱폼 영상/매거진 API 라우터입니다.

다섯 종류가 같은 엔드포인트 구성을 공유하므로 ``ContentKind`` 설명자마다
``build_content_router``로 라우터를 하나씩 만들어 등록합니다.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.middleware.auth_middleware import get_current_user, require_roles
from app.models.user import User
from app.schemas.comment import CommentCreate, CommentOut
from app.schemas.content import ContentCountOut
from app.schemas.version import ContentVersionOut, VersionDeleteResult
from app.services import comment_service, content_service, moderation_service, version_service, versioning_service
from app.services.content_kinds import KINDS, ContentKind
from app.utils.permissions import AUTHOR_ROLES, EDITORIAL_ROLES


def build_content_router(kind: ContentKind) -> APIRouter:
    router = APIRouter(prefix=kind.url_prefix, tags=[kind.entity_type])
    CreateSchema = kind.create_schema
    UpdateSchema = kind.update_schema
    OutSchema = kind.out_schema

    @router.post("", response_model=OutSchema, status_code=201)
    def create_content(
        data: CreateSchema,
        db: Session = Depends(get_db),
        current_user: User = Depends(require_roles(*AUTHOR_ROLES)),
    ):
        return content_service.create_entity(db, kind, data, current_user)

    @router.get("", response_model=List[OutSchema])
    def list_content(
        status: Optional[str] = Query(None),
        news_type: Optional[str] = Query(None),
        magazine_type: Optional[str] = Query(None),
        category_id: Optional[int] = Query(None),
        q: Optional[str] = Query(None),
        limit: Optional[int] = Query(None, ge=1, le=500),
        db: Session = Depends(get_db),
    ):
        return content_service.list_entities(
            db, kind, status=status, news_type=news_type, magazine_type=magazine_type,
            category_id=category_id, q=q, limit=limit,
        )

    @router.get("/count", response_model=ContentCountOut)
    def count_content(db: Session = Depends(get_db)):
        return ContentCountOut(total=content_service.count_entities(db, kind))

    if kind.has_publication:
        @router.get("/by-year/{year}", response_model=List[OutSchema])
        def list_content_by_year(year: str, db: Session = Depends(get_db)):
            return content_service.list_by_year(db, kind, year)

    if kind.has_live_flag:
        @router.get("/latest", response_model=List[OutSchema])
        def list_latest_content(db: Session = Depends(get_db)):
            return content_service.list_latest(db, kind)

    @router.get("/{entity_id}", response_model=OutSchema)
    def get_content(entity_id: int, db: Session = Depends(get_db)):
        return content_service.get_entity(db, kind, entity_id)

    @router.put("/{entity_id}", response_model=OutSchema)
    def update_content(
        entity_id: int,
        data: UpdateSchema,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        return versioning_service.apply_edit(
            db, kind, entity_id, data.model_dump(exclude_unset=True), current_user
        )

    @router.delete("/{entity_id}")
    def delete_content(
        entity_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(require_roles(*EDITORIAL_ROLES)),
    ):
        content_service.delete_entity(db, kind, entity_id, current_user)
        return {"message": f"{kind.label}이(가) 삭제되었습니다."}

    @router.patch("/{entity_id}/approve", response_model=OutSchema)
    def approve_content(
        entity_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        return moderation_service.approve(db, kind, entity_id, current_user)

    @router.get("/{entity_id}/history", response_model=List[ContentVersionOut])
    def get_content_history(
        entity_id: int,
        db: Session = Depends(get_db),
        _current_user: User = Depends(get_current_user),
    ):
        rows = versioning_service.get_history(db, kind, entity_id)
        return [version_service.to_response(row) for row in rows]

    @router.post("/{entity_id}/revert/{version_no}", response_model=OutSchema)
    def revert_content(
        entity_id: int,
        version_no: int,
        db: Session = Depends(get_db),
        _current_user: User = Depends(require_roles(*EDITORIAL_ROLES)),
    ):
        return versioning_service.revert_to_previous_version(db, kind, entity_id, version_no)

    @router.delete("/{entity_id}/versions/{version_no}", response_model=VersionDeleteResult)
    def delete_content_version(
        entity_id: int,
        version_no: int,
        db: Session = Depends(get_db),
        _current_user: User = Depends(require_roles(*EDITORIAL_ROLES)),
    ):
        remaining = versioning_service.delete_version(db, kind, entity_id, version_no)
        return VersionDeleteResult(
            message=f"버전 {version_no}이(가) 삭제되었습니다.",
            remaining_versions=remaining,
        )

    if kind.has_comments:
        @router.get("/{entity_id}/comments", response_model=List[CommentOut])
        def list_content_comments(entity_id: int, db: Session = Depends(get_db)):
            rows = comment_service.list_comments(db, kind, entity_id)
            return [comment_service.to_response(row) for row in rows]

        @router.post("/{entity_id}/comments", response_model=CommentOut, status_code=201)
        def add_content_comment(
            entity_id: int,
            data: CommentCreate,
            db: Session = Depends(get_db),
            current_user: User = Depends(get_current_user),
        ):
            row = comment_service.add_comment(db, kind, entity_id, data, current_user)
            return comment_service.to_response(row)

        @router.delete("/{entity_id}/comments/{comment_id}")
        def delete_content_comment(
            entity_id: int,
            comment_id: int,
            db: Session = Depends(get_db),
            current_user: User = Depends(get_current_user),
        ):
            comment_service.delete_comment(db, kind, entity_id, comment_id, current_user)
            return {"message": "댓글이 삭제되었습니다."}

    return router


routers = [build_content_router(kind) for kind in KINDS.values()]
