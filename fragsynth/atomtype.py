"""Atom types of the form ``<element>[.<special>][<digit>]``."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class AtomTypeError(ValueError):
    """Raised when an atom type string cannot be recognised."""


class Element(enum.Enum):
    CARBON = "C"
    CHLORINE = "Cl"
    HYDROGEN = "H"
    NITROGEN = "N"
    OXYGEN = "O"
    PHOSPHORUS = "P"
    SULFUR = "S"
    FLUORINE = "F"
    BROMINE = "Br"
    BORON = "B"
    IODINE = "I"


class Special(enum.Enum):
    """Hybridisation or environment qualifier; the value is its printed form."""

    AM = "am"
    AROMATIC = "ar"
    NONE = ""
    PL = "pl"
    CO = "co"
    O = "O"
    CAT = "cat"


_ELEMENTS = {element.value: element for element in Element}
_SPECIALS = {special.value.lower(): special for special in Special}


@dataclass(frozen=True)
class AtomType:
    """An element with an optional qualifier and an optional single-digit number."""

    element: Element
    number: int | None = None
    special: Special = Special.NONE

    def symbol(self) -> str:
        """Return the element symbol alone."""
        return self.element.value

    def __str__(self) -> str:
        if self.element is Element.CHLORINE:
            return "Cl"
        text = f"{self.element.value}.{self.special.value}"
        if self.number is not None:
            text += str(self.number)
        return text


def _parse_element(symbol: str) -> Element:
    try:
        return _ELEMENTS[symbol]
    except KeyError:
        raise AtomTypeError(f"element {symbol!r} not recognized") from None


def _parse_special(text: str) -> Special:
    try:
        return _SPECIALS[text.lower()]
    except KeyError:
        raise AtomTypeError(f"special qualifier {text!r} not recognized") from None


def parse_atom_type(text: str) -> AtomType:
    """Parse a string such as ``C.3``, ``N.am`` or ``Cl`` into an AtomType."""
    prefix, period, suffix = text.partition(".")
    number: int | None = None
    if period and text[-1].isdigit():
        number = int(text[-1])
        suffix = suffix[:-1]
    return AtomType(_parse_element(prefix), number, _parse_special(suffix))