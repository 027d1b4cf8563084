"""In-process settings store."""

from __future__ import annotations


class InMemorySettingsStore:
    """Dict-backed settings store."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get_setting(self, key: str) -> str | None:
        return self._values.get(key)

    def set_setting(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete_setting(self, key: str) -> None:
        self._values.pop(key, None)

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)
