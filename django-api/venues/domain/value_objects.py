"""Domain primitives that enforce validity at creation time."""

import re
import unicodedata
from dataclasses import dataclass
from typing import Self

# Whitespace that survived one round of percent-decoding, e.g. "msg%2520garden".
_ENCODED_WHITESPACE = re.compile(r"%(20|09|0a|0d)", re.IGNORECASE)


@dataclass(frozen=True)
class VenueId:
    """Unique, case-sensitive identifier for a Venue."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("Venue ID must be a non-empty string")

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse an ID taken from a request path.

        The value is used as-is (no trimming or case folding) but must not
        contain whitespace, control characters or encoded whitespace.
        """
        for char in value:
            if char.isspace() or unicodedata.category(char).startswith("C"):
                raise ValueError("Venue ID contains whitespace or control characters")
        if _ENCODED_WHITESPACE.search(value):
            raise ValueError("Venue ID contains encoded whitespace")
        return cls(value=value)

    def __str__(self) -> str:
        return self.value
