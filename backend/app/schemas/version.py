"""콘텐츠 버전 이력 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel


class ContentVersionOut(BaseModel):
    version_id: int
    entity_type: str
    entity_id: int
    version_no: int
    snapshot: Dict[str, Any]
    updated_by: int
    updated_by_name: Optional[str] = None
    updated_by_email: Optional[str] = None
    updated_at: Optional[datetime] = None


class VersionDeleteResult(BaseModel):
    message: str
    remaining_versions: int
