from datetime import date, timedelta
from fractions import Fraction

import suite
import listy as ls
from dgen import int_lists

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

mixed = [-2, -1, 0, 1, 2]
unsorted = [1, -3, 4, 1, 8, -1]


# reverse()

@test("reverse flips the order")
def test_reverse_basic():
    assert_that(ls.reverse(mixed) == [2, 1, 0, -1, -2], "reversed mixed")
    assert_that(ls.reverse([]) == [], "empty")


@test("reverse is an involution on random data")
def test_reverse_involution():
    for data in int_lists(40, seed=13):
        assert_that(ls.reverse(ls.reverse(data)) == data, f"double reverse changed {data}")
        assert_that(len(ls.reverse(data)) == len(data), "length preserved")


@test("reverse accepts strings and generators")
def test_reverse_iterables():
    assert_that(ls.reverse("abc") == ["c", "b", "a"], "characters reversed")
    assert_that(ls.reverse(x * x for x in range(4)) == [9, 4, 1, 0], "generator reversed")


# zip()

@test("zip pairs elements positionally")
def test_zip_basic():
    result = ls.zip(unsorted, "abcdef")
    expected = [(1, 'a'), (-3, 'b'), (4, 'c'), (1, 'd'), (8, 'e'), (-1, 'f')]
    assert_that(result == expected, f"unexpected pairs {result}")


@test("zip clamps to the shorter input")
def test_zip_clamps():
    assert_that(ls.zip([1, 2, 3], "ab") == [(1, 'a'), (2, 'b')], "second shorter")
    assert_that(ls.zip([1], "abc") == [(1, 'a')], "first shorter")
    assert_that(ls.zip([], "abc") == [], "empty first")


@test("zip strict rejects unequal lengths")
def test_zip_strict():
    err = assert_raises(ValueError, ls.zip, [1, 2, 3], "ab", strict=True)
    assert_that("3 != 2" in str(err), f"message should name both lengths: {err}")
    assert_that(ls.zip([1, 2], "ab", strict=True) == [(1, 'a'), (2, 'b')], "equal lengths pass")


# duplicate()

@test("duplicate repeats an element")
def test_duplicate_basic():
    assert_that(ls.duplicate(10, 5) == [10, 10, 10, 10, 10], "five tens")
    assert_that(ls.duplicate("x", 0) == [], "zero copies")


@test("duplicate rejects a negative count")
def test_duplicate_negative():
    assert_raises(ValueError, ls.duplicate, 1, -1)
    assert_raises(TypeError, ls.duplicate, 1, 2.5)


# sequence()

@test("sequence steps up to stop")
def test_sequence_basic():
    assert_that(ls.sequence(5, 10, 2) == [5, 7, 9], "stop is passed, not reached")
    assert_that(ls.sequence(0, 6, 2) == [0, 2, 4, 6], "stop reached exactly")
    assert_that(ls.sequence(1, 1, 1) == [1], "start equals stop")


@test("sequence always includes start")
def test_sequence_start_past_stop():
    assert_that(ls.sequence(10, 5, 1) == [10], "start beyond stop is still returned")


@test("sequence rejects non advancing increments")
def test_sequence_bad_increment():
    assert_raises(ValueError, ls.sequence, 1, 10, 0)
    assert_raises(ValueError, ls.sequence, 1, 10, -1)
    assert_raises(ValueError, ls.sequence, 10, 1, -1)


@test("sequence raises once float rounding stops the progression")
def test_sequence_float_stall():
    # 2**53 + 1 is not representable, so the third step lands back on 2**53
    err = assert_raises(ValueError, ls.sequence, 2.0 ** 53 - 2, 2.0 ** 53 + 10, 1.0)
    assert_that("does not advance" in str(err), f"unexpected message: {err}")


@test("sequence works with fractions and dates")
def test_sequence_generic():
    thirds = ls.sequence(Fraction(0), Fraction(1), Fraction(1, 3))
    assert_that(thirds == [0, Fraction(1, 3), Fraction(2, 3), 1], f"unexpected {thirds}")

    days = ls.sequence(date(2024, 1, 1), date(2024, 1, 8), timedelta(days=3))
    assert_that(days == [date(2024, 1, 1), date(2024, 1, 4), date(2024, 1, 7)], f"unexpected {days}")


if __name__ == "__main__":
    suite.main(title="listy structural transforms")
