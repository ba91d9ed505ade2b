"""Auth Service 도메인 서비스 레이어입니다. 토큰 발급/검증과 모의 SSO 로그인을 담당합니다."""

import logging
from datetime import datetime, timedelta
from jose import JWTError, jwt
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from app.models.user import User
from app.config import settings

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
ACCESS = "access"
REFRESH = "refresh"


def _encode(user_id: int, token_type: str, expires_delta: timedelta) -> str:
    expire = datetime.utcnow() + expires_delta
    payload = {"sub": str(user_id), "type": token_type, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def create_access_token(user_id: int) -> str:
    return _encode(user_id, ACCESS, timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))


def create_refresh_token(user_id: int) -> str:
    return _encode(user_id, REFRESH, timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS))


def decode_token(token: str, token_type: str = ACCESS) -> dict:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    if payload.get("type") != token_type or payload.get("sub") is None:
        raise HTTPException(status_code=401, detail="Invalid token payload")
    return payload


def get_active_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.user_id == int(user_id)).first()
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    if user.is_blocked:
        raise HTTPException(status_code=403, detail="차단된 사용자입니다. 관리자에게 문의하세요.")
    return user


def mock_sso_login(db: Session, email: str) -> User:
    normalized = (email or "").strip().lower()
    user = db.query(User).filter(User.email == normalized).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"이메일 '{normalized}'에 해당하는 사용자를 찾을 수 없습니다.",
        )
    if user.is_blocked:
        raise HTTPException(status_code=403, detail="차단된 사용자입니다. 관리자에게 문의하세요.")
    user.last_logged_in = datetime.utcnow()
    db.commit()
    db.refresh(user)
    logger.info("[auth] user %s logged in (role=%s)", user.user_id, user.role)
    return user


def refresh_access_token(db: Session, refresh_token: str) -> User:
    payload = decode_token(refresh_token, REFRESH)
    return get_active_user(db, payload["sub"])
