"""Literal-syntax input.

A RawLiteral is what a tagged template hands over before any composition has
happened: text segments with their raw view, and the interpolated values as
given, possibly still containing nested fragments and collections. parse()
builds one from a str.format style string."""

import string
from typing import Any, Iterable, Optional

from seglit.compose import flatten
from seglit.error import MissingValueError, TemplateSyntaxError
from seglit.fragment import Fragment


class RawLiteral:
    def __init__(
        self,
        strings: Iterable[str],
        *values: Any,
        raw: Optional[Iterable[str]] = None,
    ) -> None:
        self.strings = tuple(strings)
        self.values = values
        self.raw = self.strings if raw is None else tuple(raw)
        if len(self.strings) != len(self.values) + 1:
            raise ValueError(
                "RawLiteral needs one more segment than values, got {} segments "
                "and {} values".format(len(self.strings), len(self.values))
            )
        if len(self.raw) != len(self.strings):
            raise ValueError(
                "Raw view has {} segments, expected {}".format(
                    len(self.raw), len(self.strings)
                )
            )

    def __eq__(self, other) -> bool:
        if not isinstance(other, RawLiteral):
            return NotImplemented
        return (self.strings, self.raw, self.values) == (
            other.strings,
            other.raw,
            other.values,
        )

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return "RawLiteral({!r}, {})".format(
            list(self.strings), ", ".join(map(repr, self.values))
        )


_formatter = string.Formatter()


def _escape(text: str) -> str:
    return text.replace("{", "{{").replace("}", "}}")


class _FieldResolver:
    """Looks up replacement fields, numbering them the way str.format does.

    Automatic numbering runs on through nested fields in format specs, so
    "{:{}}" takes the value from the first argument and the width from the
    second."""

    def __init__(self, format_string: str, args, kwargs) -> None:
        self.format_string = format_string
        self.args = args
        self.kwargs = kwargs
        self.auto_index: Optional[int] = 0

    def _syntax_error(self, message: str) -> TemplateSyntaxError:
        return TemplateSyntaxError(self.format_string, message)

    def lookup(self, field: str) -> Any:
        if field == "" or field[0] in ".[":
            if self.auto_index is None:
                raise self._syntax_error(
                    "cannot switch from manual field numbering to automatic"
                )
            field = str(self.auto_index) + field
            self.auto_index += 1
        elif field.split(".", 1)[0].split("[", 1)[0].isdigit():
            if self.auto_index:
                raise self._syntax_error(
                    "cannot switch from automatic field numbering to manual"
                )
            self.auto_index = None

        try:
            value, _ = _formatter.get_field(field, self.args, self.kwargs)
        except (IndexError, KeyError, AttributeError) as e:
            raise MissingValueError(field) from e
        return value

    def expand_spec(self, spec: str) -> str:
        parts = []
        for literal, field, nested_spec, conversion in _formatter.parse(spec):
            parts.append(literal)
            if field is not None:
                parts.append(self.format(self.lookup(field), conversion, nested_spec))
        return "".join(parts)

    def format(self, value: Any, conversion: Optional[str], spec: str) -> str:
        try:
            return _formatter.format_field(
                _formatter.convert_field(value, conversion), spec
            )
        except ValueError as e:
            raise self._syntax_error(str(e)) from e


def parse(format_string: str, *args: Any, **kwargs: Any) -> RawLiteral:
    """Build raw literal input from a str.format style string.

    Every replacement field becomes a value slot instead of being formatted into
    the text. A field with a conversion or format spec fills its slot with the
    formatted string."""

    try:
        chunks = list(_formatter.parse(format_string))
    except ValueError as e:
        raise TemplateSyntaxError(format_string, str(e)) from e

    fields = _FieldResolver(format_string, args, kwargs)
    strings = [""]
    raw = [""]
    values = []

    for literal, field, spec, conversion in chunks:
        strings[-1] += literal
        raw[-1] += _escape(literal)
        if field is None:
            continue

        value = fields.lookup(field)
        if conversion or spec:
            try:
                spec = fields.expand_spec(spec or "")
            except ValueError as e:
                raise TemplateSyntaxError(format_string, str(e)) from e
            value = fields.format(value, conversion, spec)

        values.append(value)
        strings.append("")
        raw.append("")

    return RawLiteral(strings, *values, raw=raw)


def fmt(format_string: str, *args: Any, **kwargs: Any) -> Fragment:
    """Parse a str.format style string and flatten it into a Fragment."""
    return flatten(parse(format_string, *args, **kwargs))
