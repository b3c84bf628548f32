import io

import pytest

from tunnelgfx.util import (
    HashTable,
    file_size,
    read_text_file,
    remove_at_fast,
    remove_at_linear,
    remove_item_fast,
    remove_item_linear,
    string_hash,
)


def test_empty_string_hashes_to_zero():
    assert string_hash("") == 0


def test_hash_stops_at_nul():
    assert string_hash("abc\0def") == string_hash("abc")
    assert string_hash("\0abc") == 0


@pytest.mark.parametrize("text", ["a", "texture", "test_texture", "ÿé", "Z" * 100])
def test_hash_is_below_modulus(text):
    assert 0 <= string_hash(text) < 86969


def test_hash_is_deterministic():
    assert string_hash("test_texture") == string_hash("test_" + "texture")


def test_remove_item_linear_keeps_order():
    items = [1, 2, 3, 2, 4]
    remove_item_linear(items, 2)
    assert items == [1, 3, 2, 4]


def test_remove_item_fast_moves_last():
    items = [1, 2, 3, 4]
    remove_item_fast(items, 2)
    assert items == [1, 4, 3]


def test_remove_item_fast_last_element():
    items = ["a", "b"]
    remove_item_fast(items, "b")
    assert items == ["a"]


@pytest.mark.parametrize("remover", [remove_item_linear, remove_item_fast])
def test_remove_missing_item_raises(remover):
    items = [1, 2, 3]
    with pytest.raises(ValueError):
        remover(items, 9)
    assert items == [1, 2, 3]


def test_remove_at_linear():
    items = ["a", "b", "c", "d"]
    remove_at_linear(items, 1)
    assert items == ["a", "c", "d"]


def test_remove_at_fast():
    items = ["a", "b", "c", "d"]
    remove_at_fast(items, 0)
    assert items == ["d", "b", "c"]


@pytest.mark.parametrize("remover", [remove_at_linear, remove_at_fast])
@pytest.mark.parametrize("index", [-1, 3, 10])
def test_remove_at_out_of_range(remover, index):
    items = [1, 2, 3]
    with pytest.raises(IndexError):
        remover(items, index)


def test_file_size_keeps_position():
    stream = io.BytesIO(b"0123456789")
    stream.seek(4)
    assert file_size(stream) == 10
    assert stream.tell() == 4


def test_read_text_file(tmp_path):
    path = tmp_path / "shader.txt"
    path.write_text("line one\nline two\n", encoding="utf-8")
    assert read_text_file(path) == "line one\nline two\n"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_text_file(tmp_path / "missing.txt")


def test_table_add_and_get():
    table = HashTable(8)
    table.add("test_texture", "texture-object")
    table.add("other", 42)
    assert table.get("test_texture") == "texture-object"
    assert table["other"] == 42
    assert len(table) == 2
    assert "other" in table
    assert "absent" not in table


def test_table_duplicate_key_raises():
    table = HashTable()
    table.add("key", 1)
    with pytest.raises(KeyError):
        table.add("key", 2)
    assert table.get("key") == 1


def test_table_full_raises():
    table = HashTable(2)
    table.add("one", 1)
    table.add("two", 2)
    with pytest.raises(OverflowError):
        table.add("three", 3)
    assert len(table) == 2


def test_table_empty_key_raises():
    table = HashTable()
    with pytest.raises(ValueError):
        table.add("", 1)
    with pytest.raises(ValueError):
        table.get("")


def test_table_remove():
    table = HashTable(4)
    table.add("alpha", 1)
    table.remove("alpha")
    assert len(table) == 0
    with pytest.raises(KeyError):
        table.get("alpha")
    with pytest.raises(KeyError):
        table.remove("alpha")


def test_table_missing_key_raises():
    table = HashTable(4)
    with pytest.raises(KeyError):
        table.get("nothing")


def test_table_bad_size():
    with pytest.raises(ValueError):
        HashTable(0)


def test_table_reuses_slot_after_remove():
    table = HashTable(1)
    table.add("a", 1)
    table.remove("a")
    table.add("b", 2)
    assert table.get("b") == 2
    assert table.capacity == 1