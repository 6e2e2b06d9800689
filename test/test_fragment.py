from seglit import EMPTY, Fragment, RawLiteral
from seglit.fragment import Builder


def expect_exception(work, expected):
    try:
        work()
    except expected:
        pass
    else:
        raise AssertionError(f"Expected exception {expected} did not happen")


def test_structure_checked():
    expect_exception(lambda: Fragment(["a", "b"]), ValueError)
    expect_exception(lambda: Fragment(["a"], [1]), ValueError)
    expect_exception(lambda: Fragment(["a", "b"], [1], raw=["a"]), ValueError)
    expect_exception(lambda: RawLiteral(["a", "b"]), ValueError)
    expect_exception(lambda: RawLiteral(["a", "b"], 1, raw=["a"]), ValueError)


def test_immutable():
    f = Fragment(["a", "b"], [1])

    def assign():
        f.strings = ["c"]

    def set_item():
        f.strings[0] = "c"

    expect_exception(assign, AttributeError)
    expect_exception(set_item, TypeError)
    assert list(f.strings) == ["a", "b"]


def test_values_are_not_copied():
    payload = {"id": 1}
    f = Fragment(["", ""], [payload])
    assert f.values[0] is payload


def test_raw_defaults_to_strings():
    f = Fragment(["a", "b"], [1])
    assert f.raw == f.strings
    assert EMPTY == Fragment([""], [], raw=[""])


def test_equality():
    assert Fragment(["a", "b"], [1]) == Fragment(("a", "b"), (1,))
    assert Fragment(["a", "b"], [1]) != Fragment(["a", "b"], [2])
    assert Fragment(["a", "b"], [1]) != Fragment(["a", "b"], [1], raw=["a", "c"])
    assert Fragment(["a"]) != "a"


def test_repr_and_str():
    f = Fragment(["id = ", ""], [1])
    assert repr(f) == "Fragment(['id = ', ''], [1])"
    assert str(f) == "id = 1"


def test_builder_splices():
    b = Builder()
    b.add_text("WHERE ")
    b.splice(Fragment(["a = ", " AND b = ", ""], [1, 2]))
    b.add_text(" LIMIT ")
    b.add_value(10)
    f = b.build()
    assert f == Fragment(["WHERE a = ", " AND b = ", " LIMIT ", ""], [1, 2, 10])


def test_builder_single_use():
    b = Builder()
    b.build()
    expect_exception(lambda: b.add_text("x"), RuntimeError)
    expect_exception(b.build, RuntimeError)
