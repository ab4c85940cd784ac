# src/token_counter/models.py
import os
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List

from token_counter.config import BINARY_NAME, DEFAULT_MODEL, SKIP_EXTENSIONS


@dataclass(frozen=True)
class FileRecord:
    """Immutable token count of a single file."""
    path: str
    token_count: int


@dataclass
class DirectoryRecord:
    """Files counted directly inside one directory."""
    path: str
    token_count: int = 0
    files: List[FileRecord] = field(default_factory=list)

    def add(self, record: FileRecord) -> None:
        self.files.append(record)
        self.token_count += record.token_count


@dataclass
class RepositoryRecord:
    """
    Aggregate of a whole run, keyed by directory path.
    Totals only move through add_file(), so the repository total always
    equals the sum of its directories, which equals the sum of their files.
    """
    path: str
    token_count: int = 0
    dirs: Dict[str, DirectoryRecord] = field(default_factory=dict)

    @classmethod
    def single_file(cls, path: str, token_count: int) -> "RepositoryRecord":
        repo = cls(path=path)
        repo.add_file(path, token_count)
        return repo

    @property
    def file_count(self) -> int:
        return sum(len(d.files) for d in self.dirs.values())

    def add_file(self, path: str, token_count: int) -> FileRecord:
        record = FileRecord(path=path, token_count=token_count)
        dir_path = os.path.dirname(path)

        dir_record = self.dirs.get(dir_path)
        if dir_record is None:
            dir_record = DirectoryRecord(path=dir_path)
            self.dirs[dir_path] = dir_record

        dir_record.add(record)
        self.token_count += token_count
        return record


@dataclass(frozen=True)
class SkipConfig:
    """Fixed exclusion data handed to the skip predicate."""
    skip_extensions: FrozenSet[str] = SKIP_EXTENSIONS
    binary_name: str = BINARY_NAME


DEFAULT_SKIP_CONFIG = SkipConfig()


@dataclass
class CommandOptions:
    path: str = ""
    model: str = DEFAULT_MODEL
    respect_gitignore: bool = True
    show_files: bool = True
    min_tokens: int = 0
    ignore_hidden: bool = True
    single_file: bool = False
