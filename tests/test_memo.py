import logging

from the_zipper import Item, Location, MemoLocation, Section

expr = Section([Item('a'), Item('+'), Item('b')])


def test_with_memo():
    loc = Location.new(expr)
    memo = loc.with_memo()
    assert isinstance(memo, MemoLocation)
    assert memo.location is loc


def test_get_nth_matches_location():
    loc = Location.new(expr)
    memo = MemoLocation(loc)
    for n in range(4):
        assert memo.get_nth(n) == loc.get_nth(n)


def test_get_nth_is_cached():
    memo = Location.new(expr).with_memo()
    first = memo.get_nth(2)
    assert memo.get_nth(2) is first
    assert first.cursor == Item('b')


def test_clear():
    memo = Location.new(expr).with_memo()
    first = memo.get_nth(1)
    memo.clear()

    again = memo.get_nth(1)
    assert again is not first
    assert again == first


def test_logs_hits_and_misses(caplog):
    caplog.set_level(logging.DEBUG, logger='the_zipper._lib.memo')
    memo = Location.new(expr).with_memo()

    memo.get_nth(0)
    memo.get_nth(0)

    assert [r.getMessage() for r in caplog.records] == [
        'get_nth(0): miss',
        'get_nth(0): hit',
    ]
