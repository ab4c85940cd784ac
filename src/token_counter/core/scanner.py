# src/token_counter/core/scanner.py
import os
import stat
import sys

from token_counter.core.ignore import load_ignore_spec
from token_counter.core.skip import SkipPredicate
from token_counter.exceptions import ScanError, TokenCounterError
from token_counter.models import DEFAULT_SKIP_CONFIG, CommandOptions, RepositoryRecord, SkipConfig
from token_counter.utils.tokenizer import Tokenizer


class RepositoryScanner:
    def __init__(self, options: CommandOptions, tokenizer=Tokenizer, skip_config: SkipConfig = DEFAULT_SKIP_CONFIG):
        self.options = options
        self.root_path = options.path
        self.tokenizer = tokenizer
        self.skip_config = skip_config

    def _count_tokens(self, path: str) -> int:
        with open(path, "rb") as f:
            data = f.read()
        return self.tokenizer.count(data, self.options.model)

    def _meets_minimum(self, token_count: int) -> bool:
        min_tokens = self.options.min_tokens
        return min_tokens <= 0 or token_count >= min_tokens

    def is_single_file(self) -> bool:
        """Forced by the options, otherwise decided by stat'ing the root."""
        if self.options.single_file:
            return True
        try:
            st = os.stat(self.root_path)
        except OSError as e:
            raise ScanError(f"cannot access '{self.root_path}': {e.strerror}") from e
        return not stat.S_ISDIR(st.st_mode)

    def scan(self) -> RepositoryRecord:
        if self.is_single_file():
            return self.scan_file()
        return self.scan_directory()

    def scan_file(self) -> RepositoryRecord:
        """Counts the root path as one file. Any reason not to count it is fatal."""
        path = self.root_path
        try:
            st = os.stat(path)
        except OSError as e:
            raise ScanError(f"cannot access '{path}': {e.strerror}") from e

        if stat.S_ISDIR(st.st_mode):
            raise ScanError(f"'{path}' is a directory")

        name = os.path.basename(path)
        predicate = SkipPredicate(ignore_hidden=self.options.ignore_hidden, config=self.skip_config)
        if predicate.exclude_file(name, name, st.st_mode):
            raise ScanError(f"'{path}' is excluded by skip rules, no content counted")

        try:
            token_count = self._count_tokens(path)
        except (OSError, TokenCounterError) as e:
            raise ScanError(f"cannot count tokens in '{path}': {e}") from e

        if not self._meets_minimum(token_count):
            raise ScanError(
                f"'{path}' has {token_count} tokens, below the minimum of "
                f"{self.options.min_tokens}, no content counted"
            )

        return RepositoryRecord.single_file(path, token_count)

    def _on_walk_error(self, error: OSError):
        raise ScanError(f"cannot read directory '{error.filename}': {error.strerror}") from error

    def scan_directory(self) -> RepositoryRecord:
        """
        Walks the tree under the root, pruning excluded directories before
        descending so nothing below them is ever stat'd or opened.
        Per-file failures are reported and skipped; directory-read failures abort.
        """
        root_dir = self.root_path
        ignore_spec = load_ignore_spec(root_dir) if self.options.respect_gitignore else None
        predicate = SkipPredicate(
            ignore_hidden=self.options.ignore_hidden,
            ignore_spec=ignore_spec,
            config=self.skip_config,
        )
        repo = RepositoryRecord(path=root_dir)

        for root, dirs, files in os.walk(root_dir, onerror=self._on_walk_error):

            # --- 1. Prune directories (os.walk honours in-place edits of dirs) ---
            for d in list(dirs):
                rel_path = self._relative(os.path.join(root, d))
                if predicate.prune_directory(d, rel_path):
                    dirs.remove(d)

            # --- 2. Count files ---
            for f in files:
                file_path = os.path.join(root, f)
                rel_path = self._relative(file_path)

                try:
                    st = os.stat(file_path)
                except OSError as e:
                    print(f"Error processing {file_path}: {e}", file=sys.stderr)
                    continue

                if not stat.S_ISREG(st.st_mode):
                    continue

                if predicate.exclude_file(f, rel_path, st.st_mode):
                    continue

                try:
                    token_count = self._count_tokens(file_path)
                except (OSError, TokenCounterError) as e:
                    print(f"Error processing {file_path}: {e}", file=sys.stderr)
                    continue

                if not self._meets_minimum(token_count):
                    continue

                repo.add_file(file_path, token_count)

        return repo

    def _relative(self, path: str) -> str:
        return os.path.relpath(path, self.root_path).replace(os.sep, "/")
