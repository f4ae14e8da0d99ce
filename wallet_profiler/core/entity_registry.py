"""Known-entity lookup for counterparty classification."""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Set, Union
import structlog

from wallet_profiler.data.known_wallets import KNOWN_WALLETS
from wallet_profiler.exceptions import ConfigurationError
from wallet_profiler.models.wallet_data import EntityCategory, KnownEntity

logger = structlog.get_logger(__name__)


class KnownEntityRegistry:
    """Read-only address to KnownEntity table."""

    def __init__(self, entities: Optional[Mapping[str, KnownEntity]] = None):
        if entities is None:
            entities = KNOWN_WALLETS
        self._entities = MappingProxyType(dict(entities))

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, address: object) -> bool:
        return address in self._entities

    @property
    def entities(self) -> Mapping[str, KnownEntity]:
        return self._entities

    def lookup(self, address: Optional[str]) -> Optional[KnownEntity]:
        """Return the known entity for an address, or None."""
        if not address:
            return None
        return self._entities.get(address)

    def is_category(self, address: Optional[str], category: EntityCategory) -> bool:
        entity = self.lookup(address)
        return entity is not None and entity.category == category

    def is_exchange(self, address: Optional[str]) -> bool:
        return self.is_category(address, EntityCategory.EXCHANGE)

    def is_dex(self, address: Optional[str]) -> bool:
        return self.is_category(address, EntityCategory.DEX)

    def is_whale(self, address: Optional[str]) -> bool:
        return self.is_category(address, EntityCategory.WHALE)

    def categories_for(self, source: Optional[str], destination: Optional[str]) -> Set[EntityCategory]:
        """Categories matched by either endpoint of a transfer."""
        categories = set()
        for address in (source, destination):
            entity = self.lookup(address)
            if entity is not None:
                categories.add(entity.category)
        return categories

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "KnownEntityRegistry":
        """
        Build a registry extending the bundled table with entries from a JSON file.

        The file maps addresses to objects with ``name``, ``category`` and an
        optional ``sub_label``. File entries override bundled ones.
        """
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read known-entity file: {e}",
                                     details={'path': str(path)}) from e

        if not isinstance(raw, dict):
            raise ConfigurationError("Known-entity file must contain a JSON object",
                                     details={'path': str(path)})

        entities: Dict[str, KnownEntity] = dict(KNOWN_WALLETS)
        for address, entry in raw.items():
            if not isinstance(entry, dict):
                raise ConfigurationError(f"Malformed known-entity entry for {address}",
                                         details={'path': str(path)})
            try:
                category = EntityCategory(entry.get('category', 'unknown'))
            except ValueError as e:
                raise ConfigurationError(f"Unknown entity category for {address}",
                                         details={'category': entry.get('category')}) from e

            entities[address] = KnownEntity(
                address=address,
                display_name=entry.get('name', address),
                category=category,
                sub_label=entry.get('sub_label')
            )

        logger.debug("Known-entity table loaded",
                     path=str(path),
                     file_entries=len(raw),
                     total_entries=len(entities))

        return cls(entities)


def default_registry() -> KnownEntityRegistry:
    """Registry over the bundled known-wallet table."""
    return KnownEntityRegistry(KNOWN_WALLETS)
