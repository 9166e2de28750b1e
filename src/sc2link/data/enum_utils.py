"""
Helpers shared by the domain enums.

- try_enum / enum_or_default: the two ways an engine integer becomes a
  domain enum value. try_enum is fallible (unknown code -> None) and is
  used for identifiers; enum_or_default is total and is used for engine
  enums whose wire default is well defined.
- ParseableEnum.from_str: parse a variant by its exact member name
  (NumericParseableEnum also accepts the integer value).
- variant_checkers: adds an ``is_<member>`` property per member.
"""

from enum import Enum
from typing import TypeVar

from sc2link.exceptions import ParseEnumError

E = TypeVar("E", bound=Enum)


def try_enum(enum_cls: type[E], value: int | None) -> E | None:
    """Resolve value through enum_cls, or None if absent or unknown."""
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def enum_or_default(enum_cls: type[E], value: int | None, default: E) -> E:
    """Resolve value through enum_cls, falling back to the wire default."""
    resolved = try_enum(enum_cls, value)
    return default if resolved is None else resolved


class ParseableEnum:
    """Mixin adding from_str() to an Enum: exact member names only."""

    @classmethod
    def from_str(cls, text: str):  # noqa: ANN206
        members = cls.__members__  # type: ignore[attr-defined]
        if text in members:
            return members[text]
        return cls._parse_fallback(text)

    @classmethod
    def _parse_fallback(cls, text: str):  # noqa: ANN206
        raise ParseEnumError(f"{text!r} is not a valid {cls.__name__}")


class NumericParseableEnum(ParseableEnum):
    """ParseableEnum that also accepts the decimal member value ("48" -> UnitTypeId.MARINE)."""

    @classmethod
    def _parse_fallback(cls, text: str):  # noqa: ANN206
        try:
            return cls(int(text))  # type: ignore[call-arg]
        except ValueError:
            raise ParseEnumError(f"{text!r} is not a valid {cls.__name__}") from None


def variant_checkers(cls: type[E]) -> type[E]:
    """Class decorator: Attribute.LIGHT.is_light -> True, .is_armored -> False."""
    for member in cls:
        setattr(cls, f"is_{member.name.lower()}", property(lambda self, _m=member: self is _m))
    return cls
