import pytest

from midisynth.ids import INVALID_ID, IDManager, IDUnavailableError


def test_ids_start_at_one():
    manager = IDManager(10)
    assert manager.get_id() == 1
    assert not manager.is_available(INVALID_ID)


def test_ids_are_handed_out_in_order():
    manager = IDManager(5)
    assert [manager.get_id() for _ in range(5)] == [1, 2, 3, 4, 5]


def test_exhaustion_raises():
    manager = IDManager(2)
    manager.get_id()
    manager.get_id()
    with pytest.raises(IDUnavailableError):
        manager.get_id()


def test_wanted_id_is_taken():
    manager = IDManager(10)
    assert manager.get_id(7) == 7
    assert not manager.is_available(7)
    with pytest.raises(IDUnavailableError):
        manager.get_id(7)


def test_wanted_id_out_of_range_raises():
    manager = IDManager(3)
    with pytest.raises(IDUnavailableError):
        manager.get_id(4)


def test_wanted_id_is_skipped_by_automatic_allocation():
    manager = IDManager(4)
    manager.get_id(1)
    manager.get_id(2)
    assert manager.get_id() == 3


def test_release_makes_id_available_again():
    manager = IDManager(5)
    taken = [manager.get_id() for _ in range(3)]
    manager.release_id(taken[0])
    assert manager.is_available(taken[0])
    assert manager.get_id() == taken[0]


def test_release_unused_id_raises():
    manager = IDManager(5)
    with pytest.raises(IDUnavailableError):
        manager.release_id(3)


def test_release_twice_raises():
    manager = IDManager(5)
    id_ = manager.get_id()
    manager.release_id(id_)
    with pytest.raises(IDUnavailableError):
        manager.release_id(id_)


def test_release_and_reacquire_by_wanted_then_auto():
    manager = IDManager(3)
    first = manager.get_id()
    manager.release_id(first)
    assert manager.get_id(first) == first
    assert manager.get_id() == first + 1