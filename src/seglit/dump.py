"""Materializing fragments into plain text."""

from collections.abc import Callable
from typing import Any, Optional, Protocol

from seglit.classify import is_fragment, is_raw_input

Stringify = Callable[[Any], str]


class DumpSink(Protocol):
    def __call__(self, format_str: str, *args: Any) -> None: ...


def _print_sink(format_str: str, *args: Any) -> None:
    print(format_str % args)


class Dumper:
    """Turns fragments into text, passing every value through stringify.

    Nothing is escaped or quoted along the way: if the text needs to be safe for
    SQL, HTML or anything else, that's stringify's job."""

    def __init__(
        self, stringify: Stringify = str, *, sink: Optional[DumpSink] = None
    ) -> None:
        self.stringify = stringify
        self.sink = sink if sink is not None else _print_sink

    def dump(self, *args: Any) -> str:
        """Dump a fragment, raw literal input, a plain string, or strings and values
        given directly as dump(strings, *values)."""

        if len(args) == 1 and (is_fragment(args[0]) or is_raw_input(args[0])):
            strings, values = args[0].strings, args[0].values
        elif len(args) == 1 and isinstance(args[0], str):
            return args[0]
        else:
            strings, values = args[0], args[1:]

        parts = []
        for i, s in enumerate(strings):
            parts.append(s)
            if i < len(values):
                parts.append(self.stringify(values[i]))
        return "".join(parts)

    def dump_log(self, *args: Any) -> str:
        result = self.dump(*args)
        self.sink("%s", result)
        return result

    def __call__(self, *args: Any) -> str:
        return self.dump(*args)


def create_dump(stringify: Stringify, *, sink: Optional[DumpSink] = None) -> Dumper:
    return Dumper(stringify, sink=sink)


_default = Dumper()
dump = _default.dump
dump_log = _default.dump_log
