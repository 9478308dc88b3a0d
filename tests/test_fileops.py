import pytest

from filetools.fileops import (
    GREETING,
    LINE_LIMIT,
    READ_PATH,
    WRITE_PATH,
    file_size,
    main,
    read_lines,
    write_greeting,
)


def test_read_lines_keeps_newlines(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("one\ntwo\nthree")
    assert list(read_lines(path)) == ["one\n", "two\n", "three"]


def test_read_lines_splits_long_lines(tmp_path):
    path = tmp_path / "f.txt"
    line = "a" * 600 + "\n"
    path.write_text(line)
    chunks = list(read_lines(path))
    assert "".join(chunks) == line
    assert all(len(chunk) <= LINE_LIMIT for chunk in chunks)
    assert len(chunks) == 3


def test_read_lines_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(read_lines(tmp_path / "missing"))


def test_write_greeting_and_size(tmp_path):
    path = tmp_path / "g.txt"
    write_greeting(path)
    assert path.read_text() == GREETING + "\n"
    assert file_size(path) == len(GREETING) + 1


def test_file_size_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_size(tmp_path / "missing")


def test_main_full_run(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    content = "hello world\n"
    (tmp_path / READ_PATH).write_text(content)
    assert main() == 0
    out = capsys.readouterr().out
    assert out.startswith("The file was opened.\nhello world\n\n")
    assert f"Data successfully written in file {WRITE_PATH}" in out
    assert out.endswith(f"{len(content)} \n")
    assert (tmp_path / WRITE_PATH).read_text() == GREETING + "\n"


def test_main_missing_input(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main() == 1
    captured = capsys.readouterr()
    assert captured.out.startswith("Error opening file\n")