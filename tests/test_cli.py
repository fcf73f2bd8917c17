import pytest

from islandpaths.cli import check_file, main, run
from islandpaths.errors import (
    BridgeSumError,
    DuplicateBridgeError,
    FileEmptyError,
    FileMissingError,
    InvalidLineError,
    IslandCountError,
)

BORDER = "=" * 40


def _write(tmp_path, text, name="map.txt"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_usage_without_arguments(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.err == "usage: ./pathfinder [filename]\n"
    assert captured.out == ""


def test_usage_with_too_many_arguments(capsys, tmp_path):
    path = _write(tmp_path, "2\nA-B,5\n")
    main([str(path), str(path)])
    captured = capsys.readouterr()
    assert captured.err == "usage: ./pathfinder [filename]\n"
    assert captured.out == ""


def test_missing_file_message(capsys, tmp_path):
    path = tmp_path / "absent.txt"
    main([str(path)])
    assert capsys.readouterr().err == f"error: file {path} does not exist\n"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileMissingError):
        check_file(tmp_path / "absent.txt")


def test_empty_file_message(capsys, tmp_path):
    path = _write(tmp_path, "")
    main([str(path)])
    assert capsys.readouterr().err == f"error: file {path} is empty\n"


def test_directory_counts_as_empty(tmp_path):
    with pytest.raises(FileEmptyError):
        check_file(tmp_path)


@pytest.mark.parametrize("text", ["0\nA-B,5\n", "x2\nA-B,5\n", "\nA-B,5\n", "02\nA-B,5\n"])
def test_bad_first_line(text, tmp_path, capsys):
    path = _write(tmp_path, text)
    with pytest.raises(InvalidLineError) as info:
        check_file(path)
    assert info.value.line == 1
    main([str(path)])
    assert capsys.readouterr().err == "error: line 1 is not valid\n"


def test_check_file_returns_text(tmp_path):
    text = "2\nA-B,5\n"
    assert check_file(_write(tmp_path, text)) == text


def test_single_bridge_output(tmp_path, capsys):
    path = _write(tmp_path, "2\nA-B,5\n")
    main([str(path)])
    captured = capsys.readouterr()
    expected = (
        f"{BORDER}\nPath: A -> B\nRoute: A -> B\nDistance: 5\n{BORDER}\n"
    )
    assert captured.out == expected
    assert captured.err == ""


def test_main_prints_what_run_returns(tmp_path, capsys):
    path = _write(tmp_path, "3\nA-B,1\nB-C,2\nA-C,3\n")
    rendered = run(path)
    main([str(path)])
    assert capsys.readouterr().out == rendered
    assert rendered.count("Path: A -> C") == 2


def test_island_count_error(tmp_path, capsys):
    path = _write(tmp_path, "3\nA-B,1\n")
    with pytest.raises(IslandCountError):
        run(path)
    main([str(path)])
    captured = capsys.readouterr()
    assert captured.err == "error: invalid number of islands\n"
    assert captured.out == ""


def test_duplicate_bridge_error(tmp_path, capsys):
    path = _write(tmp_path, "3\nA-B,1\nB-A,2\n")
    with pytest.raises(DuplicateBridgeError):
        run(path)
    main([str(path)])
    assert capsys.readouterr().err == "error: duplicate bridges\n"


def test_invalid_bridge_line(tmp_path, capsys):
    path = _write(tmp_path, "2\nA1-B,3\n")
    with pytest.raises(InvalidLineError) as info:
        run(path)
    assert info.value.line == 2
    main([str(path)])
    assert capsys.readouterr().err == "error: line 2 is not valid\n"


def test_bridge_sum_too_big(tmp_path, capsys):
    path = _write(tmp_path, "3\nA-B,2147483647\nB-C,1\n")
    with pytest.raises(BridgeSumError):
        run(path)
    main([str(path)])
    captured = capsys.readouterr()
    assert captured.err == "error: sum of bridges lengths is too big\n"
    assert captured.out == ""