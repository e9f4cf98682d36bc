"""Optional string and boolean values that distinguish "unset" from "empty"."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OptString:
    """A string that may be absent. An empty string is still a value."""

    value: str | None = None

    @classmethod
    def not_empty(cls, value: str) -> OptString:
        """Return an optional holding ``value``, or a null one if it is empty."""
        return cls(value) if value else cls()

    def is_null(self) -> bool:
        """Whether no value is set."""
        return self.value is None

    def is_empty(self) -> bool:
        """Whether the value is set to the empty string."""
        return self.value == ""

    def non_empty(self) -> OptString:
        """Return a null optional if the value is empty, otherwise ``self``."""
        return OptString() if self.is_empty() else self

    def or_(self, other: OptString) -> OptString:
        """Return ``self`` if set, otherwise ``other``."""
        return other if self.is_null() else self

    def or_string(self, alt: str) -> OptString:
        """Return ``self`` if set, otherwise an optional holding ``alt``."""
        return OptString(alt) if self.is_null() else self

    def unwrap(self) -> str:
        """Return the value, or an empty string when unset."""
        return "" if self.value is None else self.value

    def to_json(self) -> str:
        """Serialise the value as a quoted string."""
        return f'"{self.unwrap()}"'

    def __str__(self) -> str:
        return self.unwrap()


@dataclass(frozen=True)
class OptBool:
    """A boolean that may be absent."""

    value: bool | None = None

    def is_null(self) -> bool:
        """Whether no value is set."""
        return self.value is None

    def or_(self, other: OptBool) -> OptBool:
        """Return ``self`` if set, otherwise ``other``."""
        return other if self.is_null() else self

    def or_bool(self, alt: bool) -> OptBool:
        """Return ``self`` if set, otherwise an optional holding ``alt``."""
        return OptBool(alt) if self.is_null() else self

    def unwrap(self) -> bool:
        """Return the value, or ``False`` when unset."""
        return bool(self.value)

    def to_json(self) -> str:
        """Serialise the value as a JSON boolean; unset becomes ``false``."""
        return "true" if self.unwrap() else "false"


NULL_STRING = OptString()
NULL_BOOL = OptBool()
TRUE = OptBool(True)
FALSE = OptBool(False)