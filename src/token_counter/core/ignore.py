# src/token_counter/core/ignore.py
import sys
from pathlib import Path
from typing import Optional

import pathspec

from token_counter.config import IGNORE_FILE_NAME


def load_ignore_spec(root_dir: Path) -> Optional[pathspec.PathSpec]:
    """
    Loads the .gitignore at the root of a directory run.
    Returns None when there is no file, or when it cannot be read or parsed;
    the latter is only a warning and the walk goes on without patterns.
    """
    ignore_file = Path(root_dir) / IGNORE_FILE_NAME
    if not ignore_file.is_file():
        return None

    try:
        with open(ignore_file, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
        return pathspec.PathSpec.from_lines("gitwildmatch", lines)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        print(f"Warning: Error loading {IGNORE_FILE_NAME} file: {e}", file=sys.stderr)
        return None


def is_path_ignored(spec: Optional[pathspec.PathSpec], rel_path: str, is_directory: bool = False) -> bool:
    """Checks a root-relative POSIX path against the loaded patterns."""
    if spec is None:
        return False
    # "build/" style patterns only match paths that look like directories
    if is_directory and not rel_path.endswith("/"):
        rel_path += "/"
    return spec.match_file(rel_path)
