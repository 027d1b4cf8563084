"""Cache index: cache name -> highest version ever saved (watermark).

Persisted as a single JSON object in the settings store. Loading is
strict: anything that is not a JSON object of string to string is
treated as absent, and the caller overwrites it on the next save.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import TypeAdapter, ValidationError

_INDEX_ADAPTER: TypeAdapter[dict[str, str]] = TypeAdapter(dict[str, str])


class CacheIndex:
    """Typed mapping of cache names to their version watermark.

    Versions compare as plain strings, so the watermark follows
    lexicographic order ("10.0.0" < "9.0.0").
    """

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(entries or {})

    @classmethod
    def single(cls, name: str, version: str) -> CacheIndex:
        """Index holding one name, used when the stored index is unusable."""
        return cls({name: version})

    @classmethod
    def from_blob(cls, blob: str | None) -> CacheIndex | None:
        """Deserialize a stored index.

        Args:
            blob: JSON text from the settings store, or None if unset.

        Returns:
            CacheIndex, or None when blob is missing, empty or malformed.
        """
        if not blob:
            return None
        try:
            entries = _INDEX_ADAPTER.validate_json(blob, strict=True)
        except ValidationError:
            return None
        return cls(entries)

    def to_blob(self) -> str:
        """Serialize to JSON text for the settings store."""
        return _INDEX_ADAPTER.dump_json(self._entries).decode("utf-8")

    def get(self, name: str) -> str | None:
        """Return the watermark for name, or None if the name is unknown."""
        return self._entries.get(name)

    def record(self, name: str, version: str) -> None:
        """Set the watermark for name (caller enforces monotonicity)."""
        self._entries[name] = version

    def items(self) -> list[tuple[str, str]]:
        return list(self._entries.items())

    def as_dict(self) -> dict[str, str]:
        return dict(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CacheIndex):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"CacheIndex({self._entries!r})"
