from algorithms.z_algorithm import SEPARATOR, z_algorithm_match, z_array


def test_z_array():
    assert z_array("aabxaab") == [0, 1, 0, 0, 3, 1, 0]
    assert z_array("aaaaa") == [0, 4, 3, 2, 1]
    assert z_array("") == []


def test_z_basic():
    assert z_algorithm_match("abracadabra", "abra").matches == (0, 7)
    assert z_algorithm_match("aaaaa", "aa").matches == (0, 1, 2, 3)
    assert z_algorithm_match("abc", "abcd").matches == ()


def test_z_separator_never_matches_text():
    # "$" was the classic separator; text containing it must not confuse the run
    assert z_algorithm_match("a$a$a", "a$").matches == (0, 2)
    assert SEPARATOR != "$"
    assert all(SEPARATOR != ch for ch in "abc$#\x00")


def test_z_trace_kinds():
    res = z_algorithm_match("aaaa", "aa")
    kinds = {s.kind for s in res.steps}
    assert {"extend", "update-box", "z-box", "found"} <= kinds
    extends = sum(1 for s in res.steps if s.kind == "extend")
    assert extends == res.comparisons


def test_z_empty_pattern():
    res = z_algorithm_match("abc", "")
    assert res.matches == () and res.steps == () and res.comparisons == 0
