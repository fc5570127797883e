from metricsdb.linked_list import PersistentList


def test_basics():
    lst = PersistentList()
    assert lst.head() is None

    lst = lst.prepend(1).prepend(2).prepend(3)
    assert lst.head() == 3

    lst = lst.tail()
    assert lst.head() == 2

    lst = lst.tail()
    assert lst.head() == 1

    lst = lst.tail()
    assert lst.head() is None

    lst = lst.tail()
    assert lst.head() is None


def test_iter():
    lst = PersistentList().prepend(1).prepend(2).prepend(3)
    it = iter(lst)
    assert next(it) == 3
    assert next(it) == 2
    assert next(it) == 1


def test_versions_are_independent():
    base = PersistentList().prepend("a")
    left = base.prepend("b")
    right = base.prepend("c")
    assert list(base) == ["a"]
    assert list(left) == ["b", "a"]
    assert list(right) == ["c", "a"]
    assert list(left.tail()) == ["a"]


def test_empty_iteration():
    assert list(PersistentList()) == []