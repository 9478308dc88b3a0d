from filetools.writes import DEFAULT_PATH, main, make_buffer, write_stdlib, write_syscall


def test_make_buffer_wraps_at_256():
    buffer = make_buffer(300)
    assert len(buffer) == 300
    assert buffer[0] == 0
    assert buffer[255] == 255
    assert buffer[256] == 0
    assert buffer[299] == 43


def test_make_buffer_empty():
    assert make_buffer(0) == b""


def test_write_stdlib_content(tmp_path):
    path = tmp_path / "out.raw"
    path.write_bytes(b"z" * 100)
    write_stdlib(path, 3, 10)
    assert path.read_bytes() == make_buffer(10) * 3


def test_write_syscall_content(tmp_path):
    path = tmp_path / "out.raw"
    write_syscall(path, 4, 7)
    assert path.read_bytes() == make_buffer(7) * 4


def test_write_syscall_does_not_truncate(tmp_path):
    path = tmp_path / "out.raw"
    path.write_bytes(b"x" * 10)
    write_syscall(path, 1, 4)
    assert path.read_bytes() == make_buffer(4) + b"x" * 6


def test_both_methods_agree(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    write_syscall(first, 5, 513)
    write_stdlib(second, 5, 513)
    assert first.read_bytes() == second.read_bytes()


def test_main_usage(capsys):
    assert main(["1", "2"]) == 1
    assert "count size y/n" in capsys.readouterr().err


def test_main_syscall(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["2", "8", "y"]) == 0
    assert (tmp_path / DEFAULT_PATH).read_bytes() == make_buffer(8) * 2


def test_main_stdlib_lenient_numbers(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["3abc", "5", "n"]) == 0
    assert (tmp_path / DEFAULT_PATH).read_bytes() == make_buffer(5) * 3