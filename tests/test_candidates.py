import pytest

from sudokit.candidates import Candidates


@pytest.fixture
def filled():
    cands = Candidates()
    cands.initialize()
    return cands


def test_uninitialized_is_empty():
    cands = Candidates()
    assert cands.is_empty()
    assert len(cands) == 0
    assert 5 not in cands
    assert cands.next_possible() is None
    assert list(cands) == []


def test_uninitialized_render():
    assert Candidates().render() == "Empty Tree"


def test_initialize_fills_one_to_nine(filled):
    assert list(filled) == list(range(1, 10))
    assert len(filled) == 9
    assert not filled.is_empty()
    assert filled.next_possible() == 1


def test_remove_updates_order(filled):
    filled.remove(1)
    assert 1 not in filled
    assert len(filled) == 8
    assert filled.next_possible() == 2


def test_remove_middle_keeps_order(filled):
    filled.remove(5)
    assert list(filled) == [1, 2, 3, 4, 6, 7, 8, 9]


def test_remove_absent_is_noop(filled):
    filled.remove(5)
    filled.remove(5)
    filled.remove(42)
    assert len(filled) == 8


def test_initialize_twice_does_not_reset(filled):
    filled.remove(3)
    filled.initialize()
    assert 3 not in filled
    assert len(filled) == 8


def test_remove_all_empties(filled):
    for n in range(1, 10):
        filled.remove(n)
    assert filled.is_empty()
    assert filled.next_possible() is None


def test_remove_before_initialize_stays_empty():
    cands = Candidates()
    cands.remove(4)
    assert cands.is_empty()


def test_render_lists_remaining(filled):
    filled.remove(9)
    text = filled.render()
    header, listing = text.split("\n")
    assert header == "the remaining possible numbers are:"
    assert listing.split() == [str(n) for n in range(1, 9)]