from pathlib import Path

import pytest

from packing.base import InvalidItemError, OversizePolicy
from packing.datasets import (
    DatasetError,
    DatasetNotFoundError,
    discover_datasets,
    display_name,
    generate_uniform_item_set,
    generate_weibull_item_set,
    load_dataset,
    parse_dataset,
)


def write(path: Path, text: str) -> Path:
    path.write_text(text)
    return path


def test_load_dataset(tmp_path):
    path = write(tmp_path / "u10_a.txt", "3 10\n4 5\n6\n")
    item_set = load_dataset(path)
    assert item_set.name == "u10_a.txt"
    assert item_set.capacity == 10
    assert item_set.weights == (4, 5, 6)
    assert item_set.num_items == 3
    assert item_set.lower_bound == 2


def test_empty_dataset(tmp_path):
    item_set = load_dataset(write(tmp_path / "empty", "0 10"))
    assert item_set.num_items == 0
    assert item_set.lower_bound == 0


@pytest.mark.parametrize(
    "text",
    [
        "",
        "3",
        "3 10 1 2",
        "3 10 1 2 3 4",
        "x 10 1",
        "1 ten 1",
        "2 10 1 b",
        "1 0 1",
        "2 10 1 0",
        "-1 10",
    ],
)
def test_malformed_dataset_raises(text):
    with pytest.raises(DatasetError):
        parse_dataset(text, "bad.txt")


def test_binary_dataset_raises(tmp_path):
    path = tmp_path / "blob.bin"
    path.write_bytes(b"2 10 \xff\xfe 3")
    with pytest.raises(DatasetError, match="blob.bin: not a text file"):
        load_dataset(path)


def test_oversize_policy_applied_at_load(tmp_path):
    path = write(tmp_path / "big.txt", "2 5 7 1")
    with pytest.raises(InvalidItemError):
        load_dataset(path, OversizePolicy.REJECT)
    assert load_dataset(path, OversizePolicy.CLAMP).weights == (5, 1)
    assert load_dataset(path).weights == (7, 1)


def test_discover_datasets_sorted_files_only(tmp_path):
    write(tmp_path / "b.txt", "1 1 1")
    write(tmp_path / "a.txt", "1 1 1")
    (tmp_path / "nested").mkdir()
    assert [p.name for p in discover_datasets(tmp_path)] == ["a.txt", "b.txt"]


def test_discover_missing_directory(tmp_path):
    with pytest.raises(DatasetNotFoundError, match="folder not found"):
        discover_datasets(tmp_path / "Data")


def test_display_name_escapes_underscores():
    assert display_name("u120_00.txt") == "u120\\_00"
    assert display_name("t_60_1.in.txt") == "t\\_60\\_1"
    assert display_name("plain") == "plain"


def test_generators_deterministic_and_bounded():
    for generate in (generate_uniform_item_set, generate_weibull_item_set):
        a = generate(100, capacity=50, seed=3)
        b = generate(100, capacity=50, seed=3)
        assert a == b
        assert a.num_items == 100
        assert all(1 <= w <= 50 for w in a.weights)
