"""BaseService — foundation for retailid services.

Every service receives the frozen :class:`RetailIdSettings` at
construction time and builds its domain collaborators from it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from retailid.domain.resolver import RetailIdResolver

if TYPE_CHECKING:
    from retailid.config.settings import RetailIdSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class ResolveService(BaseService):
            def resolve(self, raw: str) -> ServiceResult:
                parsed = self._resolver.resolve(raw)
                ...
    """

    def __init__(self, settings: RetailIdSettings) -> None:
        self._settings = settings
        self._resolver = RetailIdResolver(known_prefixes=settings.resolver.known_prefixes)
        logger.debug("Resolver prefixes: %s", ", ".join(self._resolver.known_prefixes))
