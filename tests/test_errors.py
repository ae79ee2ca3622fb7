from riosettings.errors import (
    DuplicateKeyError,
    SettingsError,
    SettingsFileError,
    TypeMismatchError,
    UnknownSettingError,
)
from riosettings.settings import Setting


def test_duplicate_key_error_message() -> None:
    err = DuplicateKeyError("org.example.rio.x", "writer")
    assert str(err) == "Duplicate setting key in catalog 'writer': org.example.rio.x"
    assert isinstance(err, SettingsError)


def test_duplicate_key_error_without_catalog() -> None:
    assert str(DuplicateKeyError("org.example.rio.x")) == "Duplicate setting key: org.example.rio.x"


def test_type_mismatch_error_details() -> None:
    setting = Setting.create("org.example.rio.x", "X", True)
    err = TypeMismatchError(setting, "yes")
    assert err.setting is setting
    assert err.value == "yes"
    assert err.expected is bool
    assert str(err) == "Setting 'org.example.rio.x' expects bool, got str: 'yes'"
    assert isinstance(err, TypeError)


def test_unknown_setting_error() -> None:
    err = UnknownSettingError("org.example.rio.nope")
    assert err.key == "org.example.rio.nope"
    assert str(err) == "Unknown setting key: org.example.rio.nope"
    assert isinstance(err, KeyError)


def test_settings_file_error_is_runtime_error() -> None:
    assert issubclass(SettingsFileError, RuntimeError)
    assert issubclass(SettingsFileError, SettingsError)
