# src/token_counter/core/report.py
import os
import sys
from typing import List, TextIO

from token_counter.models import RepositoryRecord


def _by_count(record) -> tuple:
    # Highest first, equal counts fall back to path order
    return (-record.token_count, record.path)


def format_report(repo: RepositoryRecord, show_files: bool = True, single_file: bool = False) -> str:
    """Renders the aggregate as text, directories and files sorted by token count."""
    lines: List[str] = [f"Token Count Summary for: {repo.path}"]

    if single_file:
        lines.append(f"Total tokens: {repo.token_count}")
        return "\n".join(lines) + "\n"

    lines.append(f"Total tokens in repository: {repo.token_count}")
    lines.append(f"Total files: {repo.file_count}")
    lines.append("")
    lines.append("Directories (sorted by token count):")
    lines.append("-" * 34)

    if not repo.dirs:
        lines.append("No files counted.")
        return "\n".join(lines) + "\n"

    for dir_record in sorted(repo.dirs.values(), key=_by_count):
        lines.append(f"{dir_record.path}: {dir_record.token_count} tokens")

        if show_files:
            for file_record in sorted(dir_record.files, key=_by_count):
                rel_path = os.path.relpath(file_record.path, repo.path)
                lines.append(f"  |- {rel_path}: {file_record.token_count} tokens")
        lines.append("")

    return "\n".join(lines) + "\n"


def print_report(repo: RepositoryRecord, show_files: bool = True, single_file: bool = False,
                 stream: TextIO = None) -> None:
    stream = stream or sys.stdout
    stream.write(format_report(repo, show_files=show_files, single_file=single_file))
