"""Segmented literal representation: fragments and the builder that makes them."""

from typing import Any, Iterable, List, Optional

from pyrsistent import pvector


class Fragment:
    """A piece of text as constant segments with interpolated values between them.

    There is always exactly one more segment than there are values. The raw view
    parallels the segments; fragments flattened from literal-syntax input always
    have raw == strings."""

    __slots__ = ("strings", "raw", "values")

    def __init__(
        self,
        strings: Iterable[str],
        values: Iterable[Any] = (),
        raw: Optional[Iterable[str]] = None,
    ) -> None:
        strings = pvector(strings)
        values = pvector(values)
        raw = strings if raw is None else pvector(raw)
        if len(strings) != len(values) + 1:
            raise ValueError(
                "Fragment needs one more segment than values, got {} segments "
                "and {} values".format(len(strings), len(values))
            )
        if len(raw) != len(strings):
            raise ValueError(
                "Raw view has {} segments, expected {}".format(len(raw), len(strings))
            )
        object.__setattr__(self, "strings", strings)
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "raw", raw)

    def __setattr__(self, name, value):
        raise AttributeError(f"Fragment is immutable, cannot set {name}")

    def __delattr__(self, name):
        raise AttributeError(f"Fragment is immutable, cannot delete {name}")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Fragment):
            return NotImplemented
        return (
            self.strings == other.strings
            and self.raw == other.raw
            and self.values == other.values
        )

    # values are arbitrary and possibly unhashable
    __hash__ = None  # type: ignore

    def __add__(self, other) -> "Fragment":
        from seglit.compose import concat

        return concat(self, other)

    def __radd__(self, other) -> "Fragment":
        from seglit.compose import concat

        return concat(other, self)

    def __str__(self) -> str:
        from seglit.dump import dump

        return dump(self)

    def __repr__(self) -> str:
        return "Fragment({!r}, {!r})".format(list(self.strings), list(self.values))

    def _repr_pretty_(self, p, cycle) -> None:
        p.text(repr(self) if not cycle else "...")


EMPTY = Fragment([""])


class Builder:
    """Accumulates segments and values for a single fragment.

    The builder exclusively owns its buffers until build() hands them over to an
    immutable Fragment, after which it can't be used again."""

    def __init__(self) -> None:
        self._strings: Optional[List[str]] = [""]
        self._raw: Optional[List[str]] = [""]
        self._values: Optional[List[Any]] = []

    def _check_open(self) -> None:
        if self._values is None:
            raise RuntimeError("Builder has already been built")

    def add_text(self, s: str, raw: Optional[str] = None) -> None:
        self._check_open()
        self._strings[-1] += s
        self._raw[-1] += s if raw is None else raw

    def add_value(self, value: Any) -> None:
        self._check_open()
        self._values.append(value)
        self._strings.append("")
        self._raw.append("")

    def splice(self, fragment: Fragment) -> None:
        """Append a fragment, gluing its first segment onto the current last one."""
        self.add_text(fragment.strings[0], fragment.raw[0])
        for value, s, raw in zip(
            fragment.values, fragment.strings[1:], fragment.raw[1:]
        ):
            self.add_value(value)
            self.add_text(s, raw)

    def build(self, keep_raw: bool = True) -> Fragment:
        self._check_open()
        result = Fragment(
            self._strings, self._values, self._raw if keep_raw else None
        )
        self._strings = self._raw = self._values = None
        return result


def single(s: str) -> Fragment:
    "A fragment of one segment and no values."
    return Fragment([s])
