"""Typed setting descriptors.

A ``Setting`` is an immutable, type-tagged configuration key carrying a
default value. Two settings are the same setting when their keys are equal,
so a descriptor declared in one module can be looked up from another by its
key string alone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar, get_origin

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from riosettings.errors import TypeMismatchError

T = TypeVar("T")


def _build_adapter(value_type: Any) -> Optional[TypeAdapter[Any]]:
    try:
        return TypeAdapter(value_type)
    except PydanticSchemaGenerationError:
        # No schema (plain classes, dataclasses with such fields): checked by isinstance
        return None


@dataclass(frozen=True)
class Setting(Generic[T]):
    """Declaration of one named, typed, defaulted setting.

    Attributes:
        key: Globally unique identifier, reverse-domain style
            (e.g. ``org.eclipse.rdf4j.rio.prettyprint``)
        display_name: Human-readable label, informational only
        default_value: Value returned when no override is set
        value_type: Type every override must have; fixed at construction
        description: Optional longer documentation of the setting

    Examples:
        PRETTY_PRINT = Setting.create(
            "org.eclipse.rdf4j.rio.prettyprint", "Pretty print", True
        )
        PRETTY_PRINT.value_type  # bool
    """

    key: str
    display_name: str = field(compare=False)
    default_value: T = field(compare=False)
    value_type: Any = field(default=None, compare=False)
    description: str = field(default="", compare=False, repr=False)
    _adapter: Optional[TypeAdapter[Any]] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key.strip():
            raise ValueError("Setting key must be a non-empty string")
        if self.default_value is None:
            raise ValueError(f"Setting '{self.key}' must declare a default value")

        value_type = self.value_type if self.value_type is not None else type(self.default_value)
        object.__setattr__(self, "value_type", value_type)
        object.__setattr__(self, "_adapter", _build_adapter(value_type))

        # The default must satisfy the same check as any override
        self.validate(self.default_value)

    @classmethod
    def create(
        cls,
        key: str,
        display_name: str,
        default_value: T,
        value_type: Optional[Any] = None,
        description: str = "",
    ) -> Setting[T]:
        """Create a setting descriptor.

        Args:
            key: Unique setting key
            display_name: Human-readable label
            default_value: Default value, never None
            value_type: Value type (default: the type of ``default_value``)
            description: Optional documentation text

        Returns:
            A new immutable Setting

        Raises:
            ValueError: If the key is empty or the default is missing
            TypeMismatchError: If the default does not match ``value_type``
        """
        return cls(
            key=key,
            display_name=display_name,
            default_value=default_value,
            value_type=value_type,
            description=description,
        )

    def validate(self, value: Any) -> T:
        """Check that a value has this setting's type, without coercion.

        Args:
            value: Candidate override value

        Returns:
            The validated value

        Raises:
            TypeMismatchError: If the value is not of the setting's type
        """
        if self._adapter is None:
            if isinstance(value, get_origin(self.value_type) or self.value_type):
                return value
            raise TypeMismatchError(self, value)
        try:
            return self._adapter.validate_python(value, strict=True)
        except ValidationError as err:
            raise TypeMismatchError(self, value) from err

    def convert(self, raw: str) -> T:
        """Parse an external string value (property, environment variable).

        Booleans accept the usual spellings (``true``/``false``, ``yes``/``no``,
        ``1``/``0``), numbers are parsed from their decimal form.
        String settings keep surrounding whitespace, other types ignore it.

        Args:
            raw: String representation of the value

        Returns:
            The parsed value

        Raises:
            TypeMismatchError: If the string cannot be parsed as the setting's type
        """
        if self._adapter is None:
            raise TypeMismatchError(self, raw)
        # Surrounding whitespace is data for string settings
        value = raw if self.value_type is str else raw.strip()
        try:
            return self._adapter.validate_python(value)
        except ValidationError as err:
            raise TypeMismatchError(self, raw) from err

    def __str__(self) -> str:
        return self.key
