import pytest

from filetools.md5hash import CHUNK_SIZE, compute_file_hash, main


def test_empty_file_digest(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    assert compute_file_hash(path) == "d41d8cd98f00b204e9800998ecf8427e"


def test_known_digest(tmp_path):
    path = tmp_path / "abc"
    path.write_bytes(b"abc")
    assert compute_file_hash(path) == "900150983cd24fb0d6963f7d28e17f72"


def test_same_content_same_hash_across_chunks(tmp_path):
    data = bytes(range(256)) * (CHUNK_SIZE // 256 * 3 + 1)
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(data)
    second.write_bytes(data)
    result = compute_file_hash(first)
    assert len(result) == 32
    assert result == compute_file_hash(second)


def test_different_content_different_hash(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(b"one")
    second.write_bytes(b"two")
    assert compute_file_hash(first) != compute_file_hash(second)
    assert len(compute_file_hash(first)) == 32


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        compute_file_hash(tmp_path / "missing")


def test_main_prints_hash(tmp_path, capsys):
    path = tmp_path / "abc"
    path.write_bytes(b"abc")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out == f"\tMD5 Hash: {compute_file_hash(path)}\n"


def test_main_usage_error(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert "Error computing MD5 hash" in capsys.readouterr().err