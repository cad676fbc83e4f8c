"""Per-character disposition for invisible and non-printing code points."""

from typing import FrozenSet, Iterator, Optional
import unicodedata

from .config import PolicyConfig
from .types import DELETE, KEEP, REPLACE_WITH_SPACE

UNICODE_VERSION = unicodedata.unidata_version

CR = "\r"
LF = "\n"
LINE_BREAKS = frozenset((CR, LF))
NO_BREAK_SPACES = frozenset(("\u00a0", "\u202f"))
SPACE = " "

CONTROL = "Control"
FORMAT = "Format"
SURROGATE = "Surrogate"
PRIVATE_USE = "PrivateUse"
UNASSIGNED = "Unassigned"

CATEGORY_NAMES = {
    "Cc": CONTROL,
    "Cf": FORMAT,
    "Cs": SURROGATE,
    "Co": PRIVATE_USE,
    "Cn": UNASSIGNED,
}

_ALWAYS_DELETED = frozenset((CONTROL, SURROGATE, PRIVATE_USE, UNASSIGNED))

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


def iter_code_points(text: str) -> Iterator[str]:
    """Yield one character per Unicode scalar value.

    Adjacent high/low surrogate code points (left behind by surrogatepass
    decoding or JSON escapes) are joined into the astral character they
    encode. Unpaired surrogates are yielded on their own.
    """

    index = 0
    length = len(text)
    while index < length:
        ch = text[index]
        if ord(ch) in _HIGH_SURROGATES and index + 1 < length:
            low = ord(text[index + 1])
            if low in _LOW_SURROGATES:
                high = ord(ch)
                yield chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00))
                index += 2
                continue
        yield ch
        index += 1


def category_name(ch: str) -> Optional[str]:
    """Return the category C name for a character, or None."""

    if len(ch) != 1:
        return None
    return CATEGORY_NAMES.get(unicodedata.category(ch))


def deletion_set(policy: PolicyConfig) -> FrozenSet[str]:
    """Categories removed under the given policy."""

    if policy.keep_format_marks:
        return _ALWAYS_DELETED
    return _ALWAYS_DELETED | {FORMAT}


def classify(ch: str, policy: PolicyConfig) -> str:
    """Decide whether a character is kept, replaced with a space, or deleted."""

    if ch in LINE_BREAKS:
        return KEEP
    if ch in NO_BREAK_SPACES:
        return KEEP if policy.keep_no_break_space else REPLACE_WITH_SPACE
    if category_name(ch) in deletion_set(policy):
        return DELETE
    return KEEP
