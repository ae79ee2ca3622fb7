"""Per-operation containers of setting overrides."""

from __future__ import annotations

import logging
from typing import Any, Final, TypeVar

from riosettings.settings.descriptor import Setting

logger: Final = logging.getLogger(__name__)

T = TypeVar("T")


class SettingsStore:
    """Override values for settings, consulted by a writer or parser.

    A store is created for one logical operation, configured by the caller
    before the operation starts, then read by the operation. Lookups never
    fail: a setting without an override yields its default value.

    The store is not synchronized. Share it across threads only once it is
    no longer being modified.

    Examples:
        config = SettingsStore()
        config.get(BASIC_WRITER_SETTINGS.PRETTY_PRINT)  # True
        config.set(BASIC_WRITER_SETTINGS.PRETTY_PRINT, False)
        config.get(BASIC_WRITER_SETTINGS.PRETTY_PRINT)  # False
    """

    def __init__(self) -> None:
        self._overrides: dict[Setting[Any], Any] = {}

    def get(self, setting: Setting[T]) -> T:
        """Return the effective value of a setting.

        Args:
            setting: The setting to look up

        Returns:
            The override if one is set, otherwise the setting's default
        """
        if setting in self._overrides:
            return self._overrides[setting]
        return setting.default_value

    def set(self, setting: Setting[T], value: T) -> SettingsStore:
        """Set an override, replacing any previous one.

        Args:
            setting: The setting to override
            value: New value, must be of the setting's value type

        Returns:
            This store, so calls can be chained

        Raises:
            TypeMismatchError: If the value has the wrong type; the store
                is left unchanged
        """
        validated = setting.validate(value)
        # Re-key on the given descriptor so the stored key is always current
        self._overrides.pop(setting, None)
        self._overrides[setting] = validated
        logger.debug("Set %s = %r", setting.key, validated)
        return self

    def contains(self, setting: Setting[Any]) -> bool:
        """Whether an explicit override has been set for a setting."""
        return setting in self._overrides

    def clear(self, setting: Setting[Any]) -> None:
        """Remove the override for a setting, reverting it to its default."""
        if setting in self._overrides:
            del self._overrides[setting]
            logger.debug("Cleared %s", setting.key)

    def use_defaults(self) -> SettingsStore:
        """Remove every override."""
        self._overrides.clear()
        return self

    def overrides(self) -> dict[str, Any]:
        """Snapshot of the explicit overrides, keyed by setting key."""
        return {setting.key: value for setting, value in self._overrides.items()}

    def copy(self) -> SettingsStore:
        """Return an independent store holding the same overrides."""
        clone = type(self)()
        clone._overrides = dict(self._overrides)
        return clone

    def __contains__(self, setting: object) -> bool:
        return setting in self._overrides

    def __len__(self) -> int:
        return len(self._overrides)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.overrides()!r})"


class WriterConfig(SettingsStore):
    """Settings store for a single write operation."""

    pass


class ParserConfig(SettingsStore):
    """Settings store for a single parse operation."""

    pass
