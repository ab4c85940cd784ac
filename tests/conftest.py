# tests/conftest.py
import pytest

from token_counter.exceptions import EncodingError


class WordTokenizer:
    """
    Deterministic stand-in for the tiktoken adapter: one token per
    whitespace-separated word, so tests need no downloaded encodings.
    """
    models = {"cl100k_base", "o200k_base"}
    calls = []

    @classmethod
    def get_encoding(cls, model):
        if model not in cls.models:
            raise EncodingError(f"unknown model '{model}'")
        return model

    @classmethod
    def count(cls, data, model):
        cls.get_encoding(model)
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError(f"content is not valid UTF-8 ({e.reason})") from e
        cls.calls.append(text)
        return len(text.split())


def words(n):
    return " ".join(["word"] * n)


@pytest.fixture
def tokenizer():
    WordTokenizer.calls = []
    return WordTokenizer


@pytest.fixture
def sample_repo(tmp_path):
    """
    root/
      README.md          3 tokens
      src/main.py       10 tokens
      src/util.py        5 tokens
      docs/guide.md      8 tokens
      build/out.txt      7 tokens   (ignored by .gitignore)
      .hidden/secret.txt 4 tokens   (hidden)
      assets/logo.png               (denylisted extension)
      .gitignore
    """
    (tmp_path / "README.md").write_text(words(3), encoding="utf-8")

    src = tmp_path / "src"
    src.mkdir()
    (src / "main.py").write_text(words(10), encoding="utf-8")
    (src / "util.py").write_text(words(5), encoding="utf-8")

    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "guide.md").write_text(words(8), encoding="utf-8")

    build = tmp_path / "build"
    build.mkdir()
    (build / "out.txt").write_text(words(7), encoding="utf-8")

    hidden = tmp_path / ".hidden"
    hidden.mkdir()
    (hidden / "secret.txt").write_text(words(4), encoding="utf-8")

    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")

    (tmp_path / ".gitignore").write_text("build/\n*.log\n", encoding="utf-8")
    return tmp_path
