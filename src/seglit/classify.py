"""Classification of values met during composition.

Both fragments and collections of things to merge are ordered, so every value is
tagged exactly once, at the point where it enters composition, and the tag
decides how it is merged."""

from collections.abc import Sequence
from enum import Enum
from typing import Any

from seglit.fragment import Fragment


class Kind(Enum):
    ABSENT = "absent"
    STRING = "string"
    FRAGMENT = "fragment"
    RAW = "raw"
    COLLECTION = "collection"
    OPAQUE = "opaque"


def _is_sequence(x: Any) -> bool:
    return isinstance(x, Sequence) and not isinstance(x, (str, bytes, bytearray))


def is_raw_input(x: Any) -> bool:
    """Literal-syntax input: segments, a raw view of the same length, and one
    value fewer than segments. Anything exposing strings and values that way
    qualifies, including PEP 750 template strings."""

    if isinstance(x, Fragment):
        return False
    strings = getattr(x, "strings", None)
    values = getattr(x, "values", None)
    if not _is_sequence(strings) or not _is_sequence(values):
        return False
    raw = getattr(x, "raw", strings)
    return _is_sequence(raw) and len(raw) == len(strings) == len(values) + 1


def is_fragment(x: Any) -> bool:
    return isinstance(x, Fragment)


def is_mergeable_collection(x: Any) -> bool:
    return _is_sequence(x) and not is_fragment(x) and not is_raw_input(x)


def classify(x: Any) -> Kind:
    if x is None:
        return Kind.ABSENT
    if isinstance(x, str):
        return Kind.STRING
    if is_fragment(x):
        return Kind.FRAGMENT
    if is_raw_input(x):
        return Kind.RAW
    if is_mergeable_collection(x):
        return Kind.COLLECTION
    return Kind.OPAQUE
