"""콘텐츠 단위 프로세스 내 직렬화를 위한 잠금 레지스트리입니다.

잠금은 약한 참조로만 보관하므로, 사용 중인 요청이 없으면(삭제된 콘텐츠 포함) 자동으로 사라집니다.
"""

import threading
import weakref
from contextlib import contextmanager
from typing import Tuple


class _EntityLock:
    __slots__ = ("_lock", "__weakref__")

    def __init__(self):
        self._lock = threading.RLock()

    def __enter__(self):
        self._lock.acquire()
        return self

    def __exit__(self, exc_type, exc, tb):
        self._lock.release()
        return False


_registry_guard = threading.Lock()
_entity_locks: "weakref.WeakValueDictionary[Tuple[str, int], _EntityLock]" = weakref.WeakValueDictionary()


def _lock_for(entity_type: str, entity_id: int) -> _EntityLock:
    with _registry_guard:
        key = (entity_type, int(entity_id))
        lock = _entity_locks.get(key)
        if lock is None:
            lock = _EntityLock()
            _entity_locks[key] = lock
        return lock


@contextmanager
def entity_lock(entity_type: str, entity_id: int):
    """같은 콘텐츠에 대한 스냅샷→수정, 복원→삭제 같은 다단계 작업을 한 번에 하나씩 실행한다."""
    lock = _lock_for(entity_type, entity_id)
    with lock:
        yield
