import suite
import listy as ls
from dgen import int_lists

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

mixed = [-2, -1, 0, 1, 2]


# last()

@test("last returns the final element")
def test_last_basic():
    assert_that(ls.last(mixed) == 2, "last of mixed is 2")
    assert_that(ls.last(["only"]) == "only", "single element")


@test("last raises on empty input")
def test_last_empty():
    assert_raises(ValueError, ls.last, [])


# nth()

@test("nth counts from one")
def test_nth_basic():
    assert_that(ls.nth(mixed, 3) == 0, "third element is 0")
    assert_that(ls.nth(mixed, 1) == -2, "first element")
    assert_that(ls.nth(mixed, 5) == 2, "last position")


@test("nth rejects positions outside 1..len")
def test_nth_out_of_range():
    assert_raises(IndexError, ls.nth, mixed, 0)
    assert_raises(IndexError, ls.nth, mixed, 6)
    assert_raises(IndexError, ls.nth, mixed, -1)
    assert_raises(IndexError, ls.nth, [], 1)


@test("nth rejects non integer positions")
def test_nth_type_check():
    assert_raises(TypeError, ls.nth, mixed, 1.0)
    assert_raises(TypeError, ls.nth, mixed, True)


# nthtail()

@test("nthtail returns elements after the first n")
def test_nthtail_basic():
    assert_that(ls.nthtail(mixed, 3) == [1, 2], "after three elements")
    assert_that(ls.nthtail(mixed, 0) == mixed, "zero keeps everything")


@test("nthtail is empty once n reaches the length")
def test_nthtail_past_end():
    assert_that(ls.nthtail(mixed, 5) == [], "n == len")
    assert_that(ls.nthtail(mixed, 50) == [], "n > len")


@test("nthtail rejects a negative count")
def test_nthtail_negative():
    assert_raises(IndexError, ls.nthtail, mixed, -1)


@test("nthtail returns a copy")
def test_nthtail_copy():
    data = [1, 2, 3]
    tail = ls.nthtail(data, 0)
    tail.append(4)
    assert_that(data == [1, 2, 3], "input must be untouched")


# split()

@test("split returns head and tail")
def test_split_basic():
    result = ls.split(mixed, 3)
    assert_that(result == ([-2, -1, 0], [1, 2]), f"unexpected split {result}")
    assert_that(result.head == [-2, -1, 0] and result.tail == [1, 2], "named fields")


@test("split at the edges")
def test_split_edges():
    assert_that(ls.split(mixed, 0) == ([], mixed), "split at 0")
    assert_that(ls.split(mixed, 5) == (mixed, []), "split at len")
    assert_that(ls.split([], 0) == ([], []), "empty input")


@test("split rejects points outside 0..len")
def test_split_out_of_range():
    assert_raises(IndexError, ls.split, mixed, 6)
    assert_raises(IndexError, ls.split, mixed, -1)


@test("split halves reassemble the input")
def test_split_reassembles():
    for data in int_lists(40, seed=5):
        for n in range(len(data) + 1):
            head, tail = ls.split(data, n)
            assert_that(head + tail == data, f"split({data}, {n}) lost elements")
            assert_that(tail == ls.nthtail(data, n), "tail agrees with nthtail")


if __name__ == "__main__":
    suite.main(title="listy positional access")
