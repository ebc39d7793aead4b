"""BaseService: abstract foundation for all cardflow services.

Every service receives a :class:`Store` at construction time and owns
its transaction boundaries via ``self._store.transaction()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cardflow.domain.errors import ErrorCode, WorkflowViolation
from cardflow.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from cardflow.infrastructure.store import Store


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class CardService(BaseService):
            def move_to_next(self, card_id: int, columns) -> ServiceResult:
                with self._store.transaction() as txn:
                    ...
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    @staticmethod
    def _failure(op: str, violation: WorkflowViolation, **detail: object) -> ServiceResult:
        """Translate a precondition failure into a failed ServiceResult."""
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=str(violation.code),
                message=violation.message,
                detail=dict(detail),
            ),
        )

    @staticmethod
    def _not_found(op: str, entity: str, entity_id: int) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=str(ErrorCode.NOT_FOUND),
                message=f"No {entity} found with id: {entity_id}",
            ),
        )
