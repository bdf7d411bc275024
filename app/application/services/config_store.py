"""Config store: load/save lifecycle for the relation settings blob (option + optional cache)."""

from __future__ import annotations

import logging

from app.application.interfaces.repositories import IOptionRepository
from app.application.interfaces.services import ICacheService
from app.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_OPTION
from app.domain.entities import ReferenceSettings

logger = logging.getLogger(__name__)

DEFAULT_OPTION_NAME = "post_references_settings"


class ConfigStore:
    """Persists every relation definition as one option blob.

    Reads go through the cache when one is available; every save rewrites
    the whole blob and drops the cache entry. Once an instance has saved,
    its session holds uncommitted data, so later loads skip the cache in
    both directions. There is no locking: two concurrent saves race and the
    last write wins.
    """

    def __init__(
        self,
        option_repo: IOptionRepository,
        cache: ICacheService | None = None,
        *,
        option_name: str = DEFAULT_OPTION_NAME,
        cache_ttl: int = 300,
    ) -> None:
        self.option_repo = option_repo
        self.cache = cache
        self.option_name = option_name
        self.cache_ttl = cache_ttl
        self._saved = False

    def _cache_usable(self) -> bool:
        return self.cache is not None and not self._saved and self.cache.is_available()

    @property
    def cache_key(self) -> str:
        return f"{CACHE_PREFIX_OPTION}{CACHE_KEY_SEP}{self.option_name}"

    async def load(self) -> ReferenceSettings:
        """Return the current settings; defaults when the option is missing."""
        blob = None
        if self._cache_usable():
            blob = await self.cache.get(self.cache_key)
        if blob is None:
            blob = await self.option_repo.get(self.option_name)
            if blob is not None and self._cache_usable():
                await self.cache.set(self.cache_key, blob, ttl=self.cache_ttl)
        settings = ReferenceSettings.from_blob(blob)
        if settings.skipped_entries:
            logger.warning(
                "Option %s: skipped malformed relation definitions %s",
                self.option_name,
                settings.skipped_entries,
            )
        return settings

    async def save(self, settings: ReferenceSettings) -> None:
        """Overwrite the stored blob with settings."""
        await self.option_repo.set(self.option_name, settings.to_blob())
        self._saved = True
        if self.cache and self.cache.is_available():
            await self.cache.delete(self.cache_key)
        logger.debug(
            "Saved option %s (%d definitions, next_id=%d)",
            self.option_name,
            len(settings.refs),
            settings.next_id,
        )

    async def install(self) -> bool:
        """Activation hook: store the default blob unless an option already exists."""
        created = await self.option_repo.add(
            self.option_name, ReferenceSettings.default().to_blob()
        )
        if created:
            logger.info("Initialized option %s with defaults", self.option_name)
        return created

    async def uninstall(self) -> None:
        """Removal hook; the option is left in place."""
        logger.info("Uninstall: option %s left in place", self.option_name)
