"""Populate settings stores from external key/value sources.

External sources (mappings, environment variables, YAML files) name settings
by their key string. Each value is checked against the matching setting's
type before it reaches the store.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar, Final, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from riosettings.errors import SettingsFileError, UnknownSettingError
from riosettings.settings import SettingCatalog, SettingsStore

# Load environment variables from .env file(s)
load_dotenv()

logger: Final = logging.getLogger(__name__)

ENV_PREFIX: Final = "RIOSETTINGS_"
CONFIG_ENV_VAR: Final = "RIOSETTINGS_CONFIG"


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


def env_var_name(key: str, prefix: str = ENV_PREFIX) -> str:
    """Environment variable name for a setting key.

    ``org.eclipse.rdf4j.rio.prettyprint`` becomes
    ``RIOSETTINGS_ORG_ECLIPSE_RDF4J_RIO_PRETTYPRINT``.
    """
    return prefix + re.sub(r"\W", "_", key).upper()


def apply_overrides(
    store: SettingsStore,
    catalog: SettingCatalog,
    data: Mapping[str, Any],
    strict: bool = False,
) -> SettingsStore:
    """Set overrides on a store from a key/value mapping.

    Args:
        store: Store to populate
        catalog: Catalog used to resolve keys
        data: Setting key to value; strings are parsed, other values
            must already have the setting's type
        strict: Raise on keys that match no setting instead of skipping them

    Returns:
        The populated store

    Raises:
        UnknownSettingError: If ``strict`` and a key matches no setting
        TypeMismatchError: If a value does not fit its setting
    """
    # Resolve everything first so a bad entry leaves the store untouched
    resolved = []
    for key, raw in data.items():
        setting = catalog.by_key(key)
        if setting is None:
            if strict:
                raise UnknownSettingError(key)
            logger.warning("Ignoring unknown setting key: %s", key)
            continue
        value = setting.convert(raw) if isinstance(raw, str) else setting.validate(raw)
        resolved.append((setting, value))

    for setting, value in resolved:
        store.set(setting, value)
    return store


def apply_environment(
    store: SettingsStore,
    catalog: SettingCatalog,
    environ: Optional[Mapping[str, str]] = None,
    prefix: str = ENV_PREFIX,
) -> SettingsStore:
    """Set overrides on a store from environment variables.

    Args:
        store: Store to populate
        catalog: Settings to look for
        environ: Environment mapping (default: ``os.environ``)
        prefix: Variable name prefix

    Returns:
        The populated store
    """
    found = environment_overrides(catalog, environ, prefix)
    return apply_overrides(store, catalog, found, strict=True)


def environment_overrides(
    catalog: SettingCatalog,
    environ: Optional[Mapping[str, str]] = None,
    prefix: str = ENV_PREFIX,
) -> dict[str, str]:
    """Collect raw environment values for a catalog's settings, keyed by setting key."""
    env = os.environ if environ is None else environ
    found = {}
    for setting in catalog.settings():
        name = env_var_name(setting.key, prefix)
        if name in env:
            logger.debug("Environment override %s for %s", name, setting.key)
            found[setting.key] = env[name]
    return found


class SettingsFile(BaseModel):
    """Schema for a YAML settings file.

    Example:
        strict: true
        settings:
          org.eclipse.rdf4j.rio.prettyprint: false
          org.eclipse.rdf4j.rio.basedirective: "${WRITE_BASE}"
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("riosettings.yaml"),
        Path("~/.config/riosettings/settings.yaml").expanduser(),
        Path("/etc/riosettings/settings.yaml"),
    ]

    settings: dict[str, Any] = Field(
        default_factory=dict, description="Setting key to override value"
    )
    strict: bool = Field(False, description="Reject keys that match no known setting")

    @field_validator("settings", mode="before")
    @classmethod
    def none_is_empty(cls, v: Any) -> Any:
        """An empty ``settings:`` block parses as None."""
        return {} if v is None else v

    def apply(self, store: SettingsStore, catalog: SettingCatalog) -> SettingsStore:
        """Apply the file's overrides to a store."""
        return apply_overrides(store, catalog, self.settings, strict=self.strict)

    @classmethod
    def find(cls, environ: Optional[Mapping[str, str]] = None) -> Path:
        """Locate the settings file.

        Args:
            environ: Environment mapping to read RIOSETTINGS_CONFIG from
                (default: ``os.environ``)

        Returns:
            Path from RIOSETTINGS_CONFIG, else the first existing default path

        Raises:
            FileNotFoundError: If no settings file is found
        """
        env = os.environ if environ is None else environ
        env_path = env.get(CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise FileNotFoundError(f"Settings file from {CONFIG_ENV_VAR} not found: {path}")
            return path

        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        raise FileNotFoundError(
            f"No settings file found. Create riosettings.yaml or set {CONFIG_ENV_VAR}."
        )

    @classmethod
    def load(cls, path: Optional[Path] = None) -> SettingsFile:
        """Load a settings file from YAML.

        Args:
            path: Path to the file (optional, searches default locations if None)

        Returns:
            Validated SettingsFile object

        Raises:
            FileNotFoundError: If no settings file is found
            SettingsFileError: If the file cannot be parsed or is invalid
        """
        if path is None:
            path = cls.find()

        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw)
        except (OSError, yaml.YAMLError) as exc:
            raise SettingsFileError(f"Unable to read settings YAML: {exc}") from exc

        try:
            settings_file = cls.model_validate(data or {})
        except ValidationError as err:
            raise SettingsFileError(f"Invalid settings file:\n{err}") from err

        logger.info("Loaded %d setting(s) from %s", len(settings_file.settings), path)
        return settings_file


def load_store(
    catalog: SettingCatalog,
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    store: Optional[SettingsStore] = None,
) -> SettingsStore:
    """Build a store from a settings file, then environment variables.

    Environment variables win over the file. Without an explicit ``path``
    a missing settings file is not an error. Either all overrides are
    applied or, on error, the store is left unchanged.

    Args:
        catalog: Settings to resolve keys against
        path: Settings file to read (optional, searches default locations if None)
        environ: Environment mapping for RIOSETTINGS_CONFIG and setting
            overrides (default: ``os.environ``)
        store: Store to populate (default: a new SettingsStore)

    Returns:
        The populated store

    Raises:
        FileNotFoundError: If an explicit ``path``, or the file named by
            RIOSETTINGS_CONFIG, does not exist
        SettingsFileError: If the settings file is invalid
        TypeMismatchError: If a value does not fit its setting
    """
    store = store if store is not None else SettingsStore()
    env = os.environ if environ is None else environ

    if path is None:
        try:
            path = SettingsFile.find(env)
        except FileNotFoundError:
            if env.get(CONFIG_ENV_VAR):
                raise
            logger.debug("No settings file found, using defaults")
    elif not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    overrides: dict[str, Any] = {}
    strict = False
    if path is not None:
        settings_file = SettingsFile.load(path)
        overrides.update(settings_file.settings)
        strict = settings_file.strict
    overrides.update(environment_overrides(catalog, env))

    # One pass, so a bad value anywhere leaves the store untouched
    return apply_overrides(store, catalog, overrides, strict=strict)
