"""Exception classes for settings declaration and lookup.

This module defines the errors raised while building setting catalogs,
storing override values, and loading overrides from external sources.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from riosettings.settings.descriptor import Setting


class SettingsError(Exception):
    """Base exception for all settings errors."""

    pass


class DuplicateKeyError(SettingsError):
    """Raised when a catalog declares two settings with the same key.

    The catalog under construction is discarded; it is never returned to
    the caller in this state.
    """

    def __init__(self, key: str, catalog: Optional[str] = None) -> None:
        """Initialize the exception.

        Args:
            key: The key declared more than once
            catalog: Name of the catalog being built, if known
        """
        where = f" in catalog '{catalog}'" if catalog else ""
        super().__init__(f"Duplicate setting key{where}: {key}")
        self.key: str = key
        self.catalog: Optional[str] = catalog


class TypeMismatchError(SettingsError, TypeError):
    """Raised when a value does not match a setting's value type."""

    def __init__(self, setting: Setting[Any], value: Any) -> None:
        """Initialize the exception.

        Args:
            setting: The setting the value was offered for
            value: The rejected value
        """
        self.setting = setting
        self.value = value
        self.expected: Any = setting.value_type
        expected_name = getattr(self.expected, "__name__", repr(self.expected))
        super().__init__(
            f"Setting '{setting.key}' expects {expected_name}, "
            f"got {type(value).__name__}: {value!r}"
        )


class UnknownSettingError(SettingsError, KeyError):
    """Raised by strict loaders when an external key matches no setting."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown setting key: {self.key}"


class SettingsFileError(SettingsError, RuntimeError):
    """Raised when a settings file cannot be read or is invalid."""

    pass
