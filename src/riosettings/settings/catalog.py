"""Named, read-only collections of setting descriptors."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Final, Optional

from riosettings.errors import DuplicateKeyError
from riosettings.settings.descriptor import Setting

logger: Final = logging.getLogger(__name__)


class SettingCatalog(Mapping[str, Setting[Any]]):
    """A fixed set of settings declared together.

    Settings are exposed under attribute names (``catalog.PRETTY_PRINT``) and
    can also be found by their key string. No two settings in a catalog
    share a key; construction fails with DuplicateKeyError otherwise.

    Examples:
        catalog = SettingCatalog(
            "writer",
            PRETTY_PRINT=Setting.create("org.example.prettyprint", "Pretty print", True),
        )
        catalog.PRETTY_PRINT is catalog["PRETTY_PRINT"]
        catalog.by_key("org.example.prettyprint") is catalog.PRETTY_PRINT
    """

    __slots__ = ("_name", "_settings", "_by_key")

    def __init__(self, name: str, **settings: Setting[Any]) -> None:
        """Build the catalog.

        Args:
            name: Catalog name, used in error messages and listings
            **settings: Settings keyed by the attribute name to expose them under

        Raises:
            DuplicateKeyError: If two settings share a key
            TypeError: If a value is not a Setting
        """
        by_key: dict[str, Setting[Any]] = {}
        for attr, setting in settings.items():
            if not isinstance(setting, Setting):
                raise TypeError(f"Catalog entry '{attr}' is not a Setting: {setting!r}")
            if setting.key in by_key:
                raise DuplicateKeyError(setting.key, name)
            by_key[setting.key] = setting

        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_settings", dict(settings))
        object.__setattr__(self, "_by_key", by_key)
        logger.debug("Built catalog %s with %d settings", name, len(by_key))

    @classmethod
    def build(cls, name: str, settings: Mapping[str, Setting[Any]]) -> SettingCatalog:
        """Build a catalog from a mapping of attribute name to setting."""
        return cls(name, **dict(settings))

    @classmethod
    def merge(cls, name: str, *catalogs: SettingCatalog) -> SettingCatalog:
        """Combine several catalogs into one.

        Args:
            name: Name of the combined catalog
            *catalogs: Catalogs to combine

        Returns:
            A new catalog holding every setting of the inputs

        Raises:
            DuplicateKeyError: If a key appears twice
            ValueError: If two catalogs expose settings under the same attribute name
        """
        combined: dict[str, Setting[Any]] = {}
        for catalog in catalogs:
            for attr, setting in catalog.items():
                if attr in combined:
                    raise ValueError(f"Duplicate setting attribute in catalog '{name}': {attr}")
                combined[attr] = setting
        return cls(name, **combined)

    @property
    def name(self) -> str:
        """Catalog name."""
        return self._name

    def by_key(self, key: str) -> Optional[Setting[Any]]:
        """Look up a setting by its key string.

        Returns:
            The setting, or None if no setting in this catalog has that key
        """
        return self._by_key.get(key)

    def settings(self) -> list[Setting[Any]]:
        """All settings, in declaration order."""
        return list(self._settings.values())

    # ---- mapping protocol ----
    def __getitem__(self, attr: str) -> Setting[Any]:
        return self._settings[attr]

    def __iter__(self) -> Iterator[str]:
        return iter(self._settings)

    def __len__(self) -> int:
        return len(self._settings)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Setting):
            return self._by_key.get(item.key) == item
        return item in self._settings

    # ---- attribute access ----
    def __getattr__(self, attr: str) -> Setting[Any]:
        if attr.startswith("_"):
            raise AttributeError(attr)
        try:
            return self._settings[attr]
        except KeyError:
            raise AttributeError(f"Catalog '{self._name}' has no setting '{attr}'") from None

    def __setattr__(self, attr: str, value: Any) -> None:
        raise AttributeError(f"Catalog '{self._name}' is read-only")

    def __delattr__(self, attr: str) -> None:
        raise AttributeError(f"Catalog '{self._name}' is read-only")

    def __dir__(self) -> list[str]:
        return [*super().__dir__(), *self._settings]

    def __repr__(self) -> str:
        return f"SettingCatalog({self._name!r}, {list(self._settings)!r})"
