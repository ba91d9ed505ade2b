"""서비스 레이어가 사용하는 도메인 예외 타입입니다.

모두 ``HTTPException`` 하위 클래스라서 라우터에서 별도 변환 없이 상태 코드로 응답되고,
서비스 단위 테스트에서는 타입으로 구분해 검증할 수 있습니다.
"""

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ForbiddenError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class ConflictError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class VersionConflictError(ConflictError):
    """버전 번호 재할당 재시도가 모두 충돌한 경우. 클라이언트가 다시 요청하면 된다."""

    def __init__(self, entity_type: str, entity_id: int):
        super().__init__(
            detail=f"{entity_type} #{entity_id} 버전 번호가 동시 편집으로 충돌했습니다. 다시 시도해 주세요."
        )
        self.entity_type = entity_type
        self.entity_id = entity_id
