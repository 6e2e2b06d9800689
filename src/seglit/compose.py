"""Composition of fragments.

flatten() resolves literal-syntax input whose values may themselves be
fragments or collections; concat() and join() merge sequences of mergeable
items. Wherever two fragments meet, the trailing segment of the left one and
the leading segment of the right one are glued into one segment, so merging
never introduces spurious empty segments."""

from typing import Any, Sequence

from seglit.classify import Kind, classify
from seglit.fragment import Builder, Fragment, single


def flatten(literal: Any) -> Fragment:
    """Flatten literal-syntax input into a canonical fragment.

    The result has no fragments or collections left among its values. Flattening
    literal-syntax input gives a raw view equal to the segments; a Fragment keeps
    the raw view it already has."""

    strings, values = literal.strings, literal.values
    keep_raw = isinstance(literal, Fragment)
    raw = literal.raw if keep_raw else strings
    builder = Builder()
    for i, s in enumerate(strings):
        builder.add_text(s, raw[i])
        if i >= len(values):
            break
        value = values[i]
        kind = classify(value)
        if kind == Kind.COLLECTION:
            value = concat(*value)
            kind = Kind.FRAGMENT
        if kind == Kind.RAW:
            value = flatten(value)
            kind = Kind.FRAGMENT
        if kind == Kind.FRAGMENT:
            builder.splice(value)
        else:
            builder.add_value(value)
    return builder.build(keep_raw=keep_raw)


def _merge(builder: Builder, item: Any, kind: Kind) -> None:
    if kind == Kind.STRING:
        builder.add_text(item)
    elif kind == Kind.FRAGMENT:
        builder.splice(item)
    elif kind == Kind.RAW:
        builder.splice(flatten(item))
    elif kind == Kind.COLLECTION:
        builder.splice(join(item))
    else:
        builder.add_value(item)


def concat(*items: Any) -> Fragment:
    """Merge items into one fragment, in order.

    None and the empty string are dropped outright. Strings contribute text,
    fragments and raw literals are spliced in, collections are joined without a
    delimiter and spliced, and anything else takes up a single value slot."""

    builder = Builder()
    for item in items:
        if item is None or (isinstance(item, str) and not item):
            continue
        _merge(builder, item, classify(item))
    return builder.build()


def join(items: Sequence[Any], delimiter: str = "") -> Fragment:
    """Concatenate items with delimiter between adjacent ones.

    None entries are skipped, but an empty string is still an item, so it is
    still surrounded by delimiters."""

    builder = Builder()
    first = True
    for item in items:
        if item is None:
            continue
        if not first:
            builder.add_text(delimiter)
        first = False
        _merge(builder, item, classify(item))
    return builder.build()


def frag(*args: Any) -> Fragment:
    """Build a fragment.

    frag("text") is a single segment with no values, frag(raw) flattens
    literal-syntax input, and frag(a, b, ...) concatenates any mergeable items."""

    if len(args) == 1:
        kind = classify(args[0])
        if kind == Kind.STRING:
            return single(args[0])
        if kind == Kind.RAW:
            return flatten(args[0])
    return concat(*args)
