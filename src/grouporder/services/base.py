"""BaseService — shared foundation for grouporder services.

Every service receives a :class:`KindCatalog` at construction time and
reports domain failures as structured ServiceResult errors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from grouporder.services.result import ServiceResult

if TYPE_CHECKING:
    from grouporder.domain.errors import OrderingError
    from grouporder.services.catalog import CatalogError, KindCatalog

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class OrderingService(BaseService):
            def describe(self, kind: str) -> ServiceResult:
                try:
                    instance = self._catalog.resolve(kind)
                except (OrderingError, CatalogError) as exc:
                    return self._failure("describe", exc)
                ...
    """

    def __init__(self, catalog: KindCatalog) -> None:
        self._catalog = catalog

    @staticmethod
    def _failure(op: str, exc: OrderingError | CatalogError) -> ServiceResult:
        """Convert a domain or catalog error into a failed ServiceResult."""
        logger.debug("%s failed: %s", op, exc.code)
        return ServiceResult.failure(op, exc.code, exc.message, **exc.detail)
