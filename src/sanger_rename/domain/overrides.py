from __future__ import annotations

import logging
from typing import Iterator

from .models import LabelKind
from .registry import FilenameRegistry
from .rename_logic import sanitize_label

logger = logging.getLogger(__name__)


class OverrideMap:
    """
    Operator replacements for extracted primer or template labels.

    Keys are the distinct labels present when the map is seeded. A commit
    rewrites every registry entry whose current label equals the key, so an
    edit of "B" after "A" -> "B" also reaches the files that were "A".

    Example:
        overrides = OverrideMap.seed(registry, LabelKind.PRIMER)
        overrides.commit("SP1", "M13F")
        # every entry whose primer currently reads "SP1" now reads "M13F"
    """

    def __init__(self, kind: LabelKind, registry: FilenameRegistry) -> None:
        self.kind = kind
        self.registry = registry
        self._overrides: dict[str, str | None] = {}

    @classmethod
    def seed(cls, registry: FilenameRegistry, kind: LabelKind) -> OverrideMap:
        overrides = cls(kind, registry)
        for label in registry.labels(kind):
            overrides._overrides[label] = None
        return overrides

    def __len__(self) -> int:
        return len(self._overrides)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._overrides))

    def __contains__(self, key: object) -> bool:
        return key in self._overrides

    def keys(self) -> list[str]:
        return list(self._overrides)

    def items(self) -> list[tuple[str, str | None]]:
        return list(self._overrides.items())

    def get(self, key: str) -> str | None:
        return self._overrides.get(key)

    def key_at(self, index: int) -> str | None:
        keys = self.keys()
        if 0 <= index < len(keys):
            return keys[index]
        return None

    def commit(self, key: str, value: str) -> int:
        """
        Store a replacement for key and push it into matching entries.

        An empty value stores None and leaves every entry untouched.
        Returns the number of entries rewritten.
        """
        if key not in self._overrides:
            raise KeyError(f"Unknown {self.kind.value} label: {key}")
        replacement = sanitize_label(value) or None
        self._overrides[key] = replacement
        if replacement is None:
            logger.info("%s override for %r cleared", self.kind.display_name, key)
            return 0
        rewritten = 0
        for entry in self.registry:
            if entry.label(self.kind) == key:
                entry.set_label(self.kind, replacement)
                rewritten += 1
        logger.info(
            "%s override %r -> %r applied to %d file(s)",
            self.kind.display_name,
            key,
            replacement,
            rewritten,
        )
        return rewritten
