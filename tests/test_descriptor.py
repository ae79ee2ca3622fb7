from dataclasses import dataclass

import pytest

from riosettings.errors import TypeMismatchError
from riosettings.settings import Setting


class Flavour:
    def __init__(self, name: str) -> None:
        self.name = name


@dataclass
class Tuning:
    level: int
    flavour: Flavour


def test_create_infers_value_type() -> None:
    setting = Setting.create("org.example.rio.prettyprint", "Pretty print", True)
    assert setting.key == "org.example.rio.prettyprint"
    assert setting.display_name == "Pretty print"
    assert setting.default_value is True
    assert setting.value_type is bool
    assert str(setting) == "org.example.rio.prettyprint"


def test_equality_and_hash_use_key_only() -> None:
    a = Setting.create("org.example.rio.x", "First", True)
    b = Setting.create("org.example.rio.x", "Second label", False)
    c = Setting.create("org.example.rio.y", "First", True)
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert {a: 1}[b] == 1


def test_setting_is_immutable() -> None:
    setting = Setting.create("org.example.rio.x", "X", True)
    with pytest.raises(AttributeError):
        setting.default_value = False  # type: ignore[misc]


@pytest.mark.parametrize("key", ["", "   "])
def test_empty_key_rejected(key: str) -> None:
    with pytest.raises(ValueError):
        Setting.create(key, "Nameless", True)


def test_missing_default_rejected() -> None:
    with pytest.raises(ValueError):
        Setting.create("org.example.rio.x", "X", None)


def test_default_must_match_explicit_type() -> None:
    with pytest.raises(TypeMismatchError):
        Setting.create("org.example.rio.x", "X", "yes", value_type=bool)


@pytest.mark.parametrize("value", [1, 0, "true", None, 1.0])
def test_validate_is_strict_for_booleans(value: object) -> None:
    setting = Setting.create("org.example.rio.x", "X", True)
    with pytest.raises(TypeMismatchError) as info:
        setting.validate(value)
    assert info.value.setting is setting
    assert info.value.expected is bool


def test_validate_accepts_matching_value(int_setting: Setting[int]) -> None:
    assert int_setting.validate(2048) == 2048


def test_validate_arbitrary_class() -> None:
    setting = Setting.create("org.example.rio.flavour", "Flavour", Flavour("plain"))
    sweet = Flavour("sweet")
    assert setting.validate(sweet) is sweet
    with pytest.raises(TypeMismatchError):
        setting.validate("sweet")


def test_dataclass_with_unsupported_field() -> None:
    default = Tuning(1, Flavour("plain"))
    setting = Setting.create("org.example.rio.tuning", "Tuning", default)
    assert setting.value_type is Tuning
    tuned = Tuning(2, Flavour("sweet"))
    assert setting.validate(tuned) is tuned
    with pytest.raises(TypeMismatchError):
        setting.validate({"level": 2})
    with pytest.raises(TypeMismatchError):
        setting.convert("2")


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ("false", False), ("FALSE", False), ("1", True), ("no", False), (" yes ", True)],
)
def test_convert_boolean_strings(raw: str, expected: bool) -> None:
    setting = Setting.create("org.example.rio.x", "X", True)
    assert setting.convert(raw) is expected


def test_convert_integer_string(int_setting: Setting[int]) -> None:
    assert int_setting.convert("4096") == 4096


def test_convert_keeps_whitespace_for_strings() -> None:
    setting = Setting.create("org.example.rio.indent", "Indent", "\t")
    assert setting.convert("  ") == "  "
    assert setting.convert(" x ") == " x "


def test_convert_rejects_unparseable_string() -> None:
    setting = Setting.create("org.example.rio.x", "X", True)
    with pytest.raises(TypeMismatchError) as info:
        setting.convert("maybe")
    assert "org.example.rio.x" in str(info.value)
    assert "bool" in str(info.value)
