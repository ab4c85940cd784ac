# tests/test_models.py
import dataclasses
import os

import pytest

from token_counter.models import CommandOptions, FileRecord, RepositoryRecord, SkipConfig


def test_add_file_updates_every_level():
    repo = RepositoryRecord(path="root")
    repo.add_file(os.path.join("root", "src", "a.py"), 10)
    repo.add_file(os.path.join("root", "src", "b.py"), 4)
    repo.add_file(os.path.join("root", "c.md"), 6)

    src = repo.dirs[os.path.join("root", "src")]
    assert src.token_count == 14
    assert [f.token_count for f in src.files] == [10, 4]
    assert repo.dirs["root"].token_count == 6
    assert repo.token_count == 20
    assert repo.file_count == 3


def test_file_record_is_immutable():
    record = FileRecord(path="a.py", token_count=3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.token_count = 5


def test_single_file_constructor():
    repo = RepositoryRecord.single_file(os.path.join("docs", "report.txt"), 12)

    assert repo.path == os.path.join("docs", "report.txt")
    assert repo.token_count == 12
    assert list(repo.dirs) == ["docs"]


def test_defaults():
    options = CommandOptions()
    assert options.model == "cl100k_base"
    assert options.respect_gitignore is True
    assert options.show_files is True
    assert options.min_tokens == 0
    assert options.ignore_hidden is True
    assert options.single_file is False

    config = SkipConfig()
    assert ".png" in config.skip_extensions
    assert config.binary_name == "token-counter"
