import random

import pytest

from sortbench.datagen import (
    DataFormatError,
    generate_data,
    generate_random_data,
    main,
    permute,
    read_data,
    write_data,
)


def test_generate_data_length_and_range():
    data = generate_data(200, random.Random(7))
    assert len(data) == 200
    assert all(0 <= value < 200 for value in data)


def test_generate_data_is_deterministic_for_a_seed():
    first = generate_data(50, random.Random(3))
    second = generate_data(50, random.Random(3))
    assert len(first) == 50
    assert all(0 <= value < 50 for value in first)
    assert first == second


def test_generate_data_empty():
    assert generate_data(0) == []


def test_generate_data_rejects_negative():
    with pytest.raises(ValueError):
        generate_data(-1)


def test_write_data_format(tmp_path):
    path = tmp_path / "data.txt"
    write_data([3, 1, 2], path)
    assert path.read_text(encoding="utf-8") == "3\n3 1 2\n"


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    data = generate_data(100, random.Random(11))
    write_data(data, path)
    assert read_data(path) == data


def test_read_accepts_trailing_space_layout(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("4 9 8 7 6 ", encoding="utf-8")
    assert read_data(path) == [9, 8, 7, 6]


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_data(tmp_path / "absent.txt")


def test_read_too_few_values(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("5\n1 2 3\n", encoding="utf-8")
    with pytest.raises(DataFormatError):
        read_data(path)


def test_read_non_integer_value(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("2\n1 x\n", encoding="utf-8")
    with pytest.raises(DataFormatError):
        read_data(path)


def test_read_empty_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("", encoding="utf-8")
    with pytest.raises(DataFormatError):
        read_data(path)


def test_permute_keeps_elements_and_input():
    items = list(range(30))
    result = permute(items, random.Random(5))
    assert sorted(result) == items
    assert items == list(range(30))


def test_permute_is_deterministic_for_a_seed():
    items = list(range(20))
    first = permute(items, random.Random(9))
    second = permute(items, random.Random(9))
    assert sorted(first) == items
    assert first == second


def test_generate_random_data_writes_file(tmp_path):
    path = tmp_path / "data.txt"
    data = generate_random_data(40, path, random.Random(2))
    assert read_data(path) == data
    assert len(data) == 40


def test_main_with_count(tmp_path):
    path = tmp_path / "out.txt"
    assert main(["25", "--output", str(path), "--seed", "1"]) == 0
    data = read_data(path)
    assert len(data) == 25
    assert all(0 <= value < 25 for value in data)


def test_main_prompts_for_count(tmp_path, monkeypatch):
    path = tmp_path / "out.txt"
    monkeypatch.setattr("builtins.input", lambda prompt="": "12")
    assert main(["--output", str(path)]) == 0
    assert len(read_data(path)) == 12