# roark_beam/kernel/restraints.py
"""End restraints and the ten statically valid restraint pairs."""

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .errors import InvalidRestraintError


class Restraint(Enum):
    """Support condition at one end of the beam (value = original digit code)."""
    FIXED = 1     # No translation, no rotation
    SIMPLE = 2    # No translation, free rotation
    GUIDED = 3    # No rotation, free translation
    FREE = 4      # Unrestrained


# Roark Table 8.1 case for each directly tabulated (A-end, B-end) pair
ROARK_CASES = {
    (Restraint.FREE, Restraint.FIXED): "1a",
    (Restraint.GUIDED, Restraint.FIXED): "1b",
    (Restraint.SIMPLE, Restraint.FIXED): "1c",
    (Restraint.FIXED, Restraint.FIXED): "1d",
    (Restraint.SIMPLE, Restraint.SIMPLE): "1e",
    (Restraint.GUIDED, Restraint.SIMPLE): "1f",
}

# Pairs solved by reflecting a tabulated case end-for-end
MIRRORED_PAIRS = frozenset([
    (Restraint.FIXED, Restraint.FREE),
    (Restraint.FIXED, Restraint.GUIDED),
    (Restraint.FIXED, Restraint.SIMPLE),
    (Restraint.SIMPLE, Restraint.GUIDED),
])

_NAME_ALIASES = {
    "fixed": Restraint.FIXED,
    "simple": Restraint.SIMPLE,
    "pinned": Restraint.SIMPLE,
    "pin": Restraint.SIMPLE,
    "guided": Restraint.GUIDED,
    "free": Restraint.FREE,
}


@dataclass(frozen=True)
class RestraintCode:
    """
    Pair of end restraints, A end (x = 0) first.

    The two-digit integer form of the original tables is supported:
    ``RestraintCode.from_int(41)`` is Free-Fixed, ``int(code)`` gives it back.
    """
    end_a: Restraint
    end_b: Restraint

    @classmethod
    def from_int(cls, value: int) -> "RestraintCode":
        if isinstance(value, bool) or not 11 <= value <= 44:
            raise InvalidRestraintError(value)
        try:
            return cls(Restraint(value // 10), Restraint(value % 10))
        except ValueError:
            raise InvalidRestraintError(value) from None

    @classmethod
    def from_string(cls, text: str) -> "RestraintCode":
        """Parse ``"41"``, ``"free-fixed"`` or ``"Free Fixed"``."""
        cleaned = text.strip().lower()
        if cleaned.isdigit():
            return cls.from_int(int(cleaned))
        parts = cleaned.replace("_", "-").replace(" ", "-").split("-")
        parts = [p for p in parts if p]
        if len(parts) != 2 or any(p not in _NAME_ALIASES for p in parts):
            raise InvalidRestraintError(text)
        return cls(_NAME_ALIASES[parts[0]], _NAME_ALIASES[parts[1]])

    @property
    def is_valid(self) -> bool:
        pair = (self.end_a, self.end_b)
        return pair in ROARK_CASES or pair in MIRRORED_PAIRS

    @property
    def is_mirrored(self) -> bool:
        return (self.end_a, self.end_b) in MIRRORED_PAIRS

    @property
    def roark_case(self) -> Optional[str]:
        """Roark Table 8.1 case ("1a".."1f"), or None if solved by reflection."""
        return ROARK_CASES.get((self.end_a, self.end_b))

    def swapped(self) -> "RestraintCode":
        return RestraintCode(self.end_b, self.end_a)

    def __int__(self) -> int:
        return self.end_a.value * 10 + self.end_b.value

    def __str__(self) -> str:
        return f"{self.end_a.name.title()}-{self.end_b.name.title()}"


CodeLike = Union[RestraintCode, int, str]


def as_restraint_code(code: CodeLike) -> RestraintCode:
    """
    Coerce ``code`` to a valid RestraintCode.

    Raises:
        InvalidRestraintError: If the code cannot be parsed or is not one of
            the ten statically valid pairs
    """
    if isinstance(code, RestraintCode):
        parsed = code
    elif isinstance(code, numbers.Integral) and not isinstance(code, bool):
        parsed = RestraintCode.from_int(int(code))
    elif isinstance(code, str):
        parsed = RestraintCode.from_string(code)
    else:
        raise InvalidRestraintError(code)

    if not parsed.is_valid:
        raise InvalidRestraintError(code)
    return parsed


VALID_CODES = tuple(
    RestraintCode(a, b) for (a, b) in list(ROARK_CASES) + sorted(
        MIRRORED_PAIRS, key=lambda pair: (pair[0].value, pair[1].value)
    )
)
