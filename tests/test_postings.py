import pytest

from buscador.postings import PostingList


def test_new_list_is_empty():
    postings = PostingList()
    assert postings.is_empty()
    assert len(postings) == 0
    assert list(postings) == []


def test_iteration_returns_absolute_positions():
    postings = PostingList()
    for position in (10, 15, 22, 400):
        postings.add(position)
    assert list(postings) == [10, 15, 22, 400]
    assert len(postings) == 4
    assert not postings.is_empty()


def test_deltas_hold_start_and_gaps():
    postings = PostingList()
    for position in (10, 15, 22):
        postings.add(position)
    assert postings.deltas() == [10, 15 - 10, 22 - 15]


def test_first_and_last():
    postings = PostingList()
    postings.add(3)
    assert postings.first() == 3
    assert postings.last() == 3
    postings.add(50)
    assert postings.first() == 3
    assert postings.last() == 50


def test_first_on_empty_raises():
    with pytest.raises(IndexError):
        PostingList().first()


def test_last_on_empty_raises():
    with pytest.raises(IndexError):
        PostingList().last()


def test_deltas_sum_back_to_last():
    postings = PostingList()
    for position in (7, 8, 100, 1000, 1001):
        postings.add(position)
    assert sum(postings.deltas()) == postings.last()


def test_deltas_is_a_copy():
    postings = PostingList()
    postings.add(5)
    postings.deltas().append(99)
    assert postings.deltas() == [5]