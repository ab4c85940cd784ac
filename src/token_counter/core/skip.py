# src/token_counter/core/skip.py
from dataclasses import dataclass, field
from typing import Optional

import pathspec

from token_counter.core.ignore import is_path_ignored
from token_counter.models import SkipConfig

EXECUTABLE_BITS = 0o111


def file_extension(name: str) -> str:
    """Suffix from the last dot of the base name, dot included ('' if none)."""
    idx = name.rfind(".")
    return name[idx:] if idx >= 0 else ""


@dataclass(frozen=True)
class SkipPredicate:
    """
    Decides which entries of a walk are left out of the count.

    Rules, first match wins:
      1. hidden entries (name starts with '.') when ignore_hidden is set
      2. entries matching the loaded ignore patterns
      3. directories are never counted themselves, only pruned or entered
      4. extension-less files with an executable bit (compiled binaries)
      5. the tool's own binary
      6. denylisted extensions
    """
    ignore_hidden: bool = True
    ignore_spec: Optional[pathspec.PathSpec] = None
    config: SkipConfig = field(default_factory=SkipConfig)

    def _is_filtered(self, name: str, rel_path: str, is_directory: bool) -> bool:
        if self.ignore_hidden and name.startswith("."):
            return True
        return is_path_ignored(self.ignore_spec, rel_path, is_directory=is_directory)

    def prune_directory(self, name: str, rel_path: str) -> bool:
        """True if nothing below this directory should be visited."""
        return self._is_filtered(name, rel_path, is_directory=True)

    def exclude_file(self, name: str, rel_path: str, mode: int) -> bool:
        if self._is_filtered(name, rel_path, is_directory=False):
            return True

        ext = file_extension(name).lower()
        if ext == "" and mode & EXECUTABLE_BITS:
            return True

        if name == self.config.binary_name:
            return True

        return ext in self.config.skip_extensions
