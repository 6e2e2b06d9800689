from seglit import (
    Fragment,
    Kind,
    RawLiteral,
    classify,
    fmt,
    is_fragment,
    is_mergeable_collection,
    is_raw_input,
)


class TemplateLike:
    def __init__(self, strings, values):
        self.strings = strings
        self.values = values


def test_raw_input():
    assert is_raw_input(RawLiteral(["a", "b"], 1))
    assert is_raw_input(TemplateLike(("a ", ""), (1,)))
    assert not is_raw_input(TemplateLike(("a ", ""), ()))
    assert not is_raw_input(TemplateLike("ab", "c"))
    assert not is_raw_input(fmt("a {}", 1))
    assert not is_raw_input(["a", "b"])
    assert not is_raw_input("a")
    assert not is_raw_input(None)


def test_raw_view_length_must_match():
    bad = TemplateLike(("a", "b"), (1,))
    bad.raw = ("a",)
    assert not is_raw_input(bad)


def test_fragment():
    assert is_fragment(fmt("a"))
    assert not is_fragment(RawLiteral(["a"]))
    assert not is_fragment([fmt("a")])


def test_mergeable_collection():
    assert is_mergeable_collection([])
    assert is_mergeable_collection((fmt("a"),))
    assert is_mergeable_collection([fmt("a")])
    assert not is_mergeable_collection(fmt("a"))
    assert not is_mergeable_collection(RawLiteral(["a"]))
    assert not is_mergeable_collection("abc")
    assert not is_mergeable_collection(b"abc")
    assert not is_mergeable_collection({"a": 1})
    assert not is_mergeable_collection(1)


def test_classify():
    assert classify(None) == Kind.ABSENT
    assert classify("") == Kind.STRING
    assert classify(Fragment([""])) == Kind.FRAGMENT
    assert classify(RawLiteral(["", ""], 1)) == Kind.RAW
    assert classify([[], []]) == Kind.COLLECTION
    assert classify(42) == Kind.OPAQUE
    assert classify({"state": "active"}) == Kind.OPAQUE
