from metricsdb.sorted_list import SortedList


def test_basics():
    slist = SortedList()

    slist.add(5)
    assert slist.peek_begin() == 5
    assert slist.seek_end() == 5

    slist.add(4)
    assert slist.peek_begin() == 4
    assert slist.seek_end() == 5
    slist.add(6)
    assert slist.peek_begin() == 4
    assert slist.seek_end() == 6

    it = iter(slist)
    assert next(it, None) == 4
    assert next(it, None) == 5
    assert next(it, None) == 6
    assert next(it, None) is None
    assert next(it, None) is None

    assert slist.pop() == 4
    assert slist.pop() == 5
    assert slist.pop() == 6
    assert slist.pop() is None


def test_empty():
    slist = SortedList()
    assert slist.peek_begin() is None
    assert slist.seek_end() is None
    assert list(slist) == []


def test_duplicates_and_order():
    slist = SortedList()
    for value in [3, 1, 3, 2, 1]:
        slist.add(value)
    assert list(slist) == [1, 1, 2, 3, 3]
    assert len(slist) == 5