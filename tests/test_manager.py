import pytest

from startkit.errors import ErrorCode, StartError
from startkit.manager import (
    TABLE_SIZE,
    ResourceManager,
    default_manager,
    multiplicative_hash,
    pjw_hash,
)


def test_empty_key_hashes():
    assert pjw_hash("") == 0
    assert multiplicative_hash("") == 1


def test_single_character_pjw_hash_is_its_code():
    assert pjw_hash("a") == ord("a")


def test_two_character_pjw_hash_value():
    assert pjw_hash("ab") == 1650


def test_multiplicative_hash_range():
    for i in range(500):
        value = multiplicative_hash(f"resource-{i}")
        assert 1 <= value < TABLE_SIZE


def test_non_ascii_key_hashes_are_non_negative():
    assert pjw_hash("ßé") >= 0
    assert 1 <= multiplicative_hash("ßé") < TABLE_SIZE


def test_insert_and_lookup_round_trip():
    manager = ResourceManager()
    sprite = object()
    assert manager.insert("sprite", sprite) is True
    assert manager.lookup("sprite") is sprite
    assert "sprite" in manager
    assert len(manager) == 1


def test_insert_duplicate_keeps_first():
    manager = ResourceManager()
    manager.insert("font", "first")
    assert manager.insert("font", "second") is False
    assert manager.lookup("font") == "first"
    assert len(manager) == 1


def test_lookup_missing_returns_none():
    manager = ResourceManager()
    assert manager.lookup("ghost") is None
    assert "ghost" not in manager


def test_remove_returns_data():
    manager = ResourceManager()
    manager.insert("music", [1, 2])
    assert manager.remove("music") == [1, 2]
    assert manager.lookup("music") is None
    assert len(manager) == 0


def test_remove_missing_returns_none():
    manager = ResourceManager()
    manager.insert("a", 1)
    assert manager.remove("b") is None
    assert len(manager) == 1


def test_many_keys_round_trip():
    manager = ResourceManager()
    keys = [f"tex{i}" for i in range(40)]
    for i, key in enumerate(keys):
        assert manager.insert(key, i) is True
    assert len(manager) == len(keys)
    for i, key in enumerate(keys):
        assert manager.lookup(key) == i


def test_insert_none_rejected():
    manager = ResourceManager()
    with pytest.raises(StartError) as info:
        manager.insert("x", None)
    assert info.value.code is ErrorCode.NULL_POINTER


def test_overfilling_raises_invalid_range():
    manager = ResourceManager()
    with pytest.raises(StartError) as info:
        for i in range(4 * TABLE_SIZE):
            manager.insert(f"key-{i}", i)
    assert info.value.code is ErrorCode.INVALID_RANGE
    assert len(manager) <= TABLE_SIZE


def test_default_manager_is_shared_instance():
    default_manager.insert("__shared__", 5)
    try:
        assert default_manager.lookup("__shared__") == 5
    finally:
        assert default_manager.remove("__shared__") == 5