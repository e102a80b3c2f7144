import pytest

from algokit.linkedlist import LinkedList


def test_insert_preserves_order():
    first = LinkedList()
    first.insert(9)
    first.insert(10)
    assert list(first) == [9, 10]
    assert len(first) == 2


def test_separate_lists_do_not_share_nodes():
    first = LinkedList([9, 10])
    second = LinkedList()
    second.insert(11)
    assert list(first) == [9, 10]
    assert list(second) == [11]


def test_empty_list():
    empty = LinkedList()
    assert list(empty) == []
    assert len(empty) == 0


@pytest.mark.parametrize(
    "values, target",
    [([1, 2, 1, 3, 1], 1), ([4, 4, 4], 4), ([5, 6], 7), ([], 0)],
)
def test_count_matches_list_count(values, target):
    assert LinkedList(values).count(target) == values.count(target)


@pytest.mark.parametrize(
    "values, target",
    [
        ([1, 2, 1, 3, 1], 1),
        ([1, 1, 2], 1),
        ([2, 1, 1], 1),
        ([7, 7, 7], 7),
        ([5, 6], 8),
    ],
)
def test_delete_removes_every_occurrence(values, target):
    linked = LinkedList(values)
    removed = linked.delete(target)
    remaining = [v for v in values if v != target]
    assert removed == values.count(target)
    assert list(linked) == remaining
    assert len(linked) == len(remaining)
    assert linked.count(target) == 0


def test_insert_after_deleting_tail_appends_correctly():
    linked = LinkedList([1, 2, 3])
    linked.delete(3)
    linked.insert(4)
    assert list(linked) == [1, 2, 4]


def test_insert_after_emptying():
    linked = LinkedList([8, 8])
    linked.delete(8)
    linked.insert(9)
    assert list(linked) == [9]
    assert len(linked) == 1