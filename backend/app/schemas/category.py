"""Category 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class CategoryCreate(BaseModel):
    name: str
    description: Optional[str] = None


class CategoryOut(CategoryCreate):
    category_id: int
    status: str
    created_by: int
    created_at: Optional[datetime] = None
    last_updated: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CategoryUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
