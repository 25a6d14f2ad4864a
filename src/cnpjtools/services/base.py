"""BaseService — shared foundation for cnpjtools services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from cnpjtools.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from cnpjtools.config.settings import CnpjSettings


class BaseService:
    """Base for service-layer classes.

    Services receive the resolved :class:`CnpjSettings` at construction
    and read their defaults (branch, masking, seed) from it.
    """

    def __init__(self, settings: CnpjSettings) -> None:
        self._settings = settings
        self._log = structlog.get_logger(type(self).__module__)

    @staticmethod
    def _fail(
        op: str,
        code: str,
        message: str,
        *,
        data: dict[str, Any] | None = None,
        **detail: Any,
    ) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            data=data or {},
            error=ServiceError(code=code, message=message, detail=detail),
        )
