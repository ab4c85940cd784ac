# tests/test_ignore.py
from token_counter.core.ignore import is_path_ignored, load_ignore_spec


def test_no_gitignore_returns_none(tmp_path):
    assert load_ignore_spec(tmp_path) is None


def test_load_gitignore_patterns(tmp_path):
    (tmp_path / ".gitignore").write_text("# comment\nnode_modules/\n*.log\n!keep.log\n", encoding="utf-8")

    spec = load_ignore_spec(tmp_path)

    assert spec is not None
    assert is_path_ignored(spec, "node_modules", is_directory=True) is True
    assert is_path_ignored(spec, "debug.log") is True
    assert is_path_ignored(spec, "keep.log") is False
    assert is_path_ignored(spec, "src/main.py") is False


def test_unreadable_gitignore_is_a_warning(tmp_path, capsys):
    (tmp_path / ".gitignore").write_bytes(b"build/\n\xff\xfe\xfa\n")

    spec = load_ignore_spec(tmp_path)

    assert spec is None
    assert "Warning: Error loading .gitignore file" in capsys.readouterr().err


def test_is_path_ignored_without_spec():
    assert is_path_ignored(None, "anything", is_directory=True) is False
