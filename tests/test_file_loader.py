import pytest

from xutils.file_loader import FileLoader


@pytest.fixture
def keys_file(tmp_path):
    path = tmp_path / "keys.txt"
    path.write_text("1\n2\n3\n", encoding="utf-8")
    return path


def test_reads_keys_until_end(keys_file):
    with FileLoader(keys_file) as loader:
        keys = [loader.next_key(FileLoader.default_converter) for _ in range(4)]
    assert keys == [1, 2, 3, None]


def test_default_converter_used_without_argument(keys_file):
    with FileLoader(keys_file) as loader:
        assert loader.next_key() == 1


def test_custom_converter_gets_line_without_newline(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("alpha\nbeta", encoding="utf-8")
    with FileLoader(path) as loader:
        assert loader.next_key(str) == "alpha"
        assert loader.next_key(str) == "beta"
        assert loader.next_key(str) is None


def test_default_converter_takes_first_token():
    assert FileLoader.default_converter("  42 extra") == 42


def test_default_converter_rejects_empty():
    with pytest.raises(ValueError):
        FileLoader.default_converter("   ")


def test_closed_loader_cannot_read(keys_file):
    with FileLoader(keys_file) as loader:
        pass
    with pytest.raises(ValueError):
        loader.next_key()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileLoader(tmp_path / "absent.txt")