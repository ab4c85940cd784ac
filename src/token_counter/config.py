# src/token_counter/config.py

VERSION = "0.1.0"

DEFAULT_MODEL = "cl100k_base"

IGNORE_FILE_NAME = ".gitignore"

# Name of the installed console script, never counted
BINARY_NAME = "token-counter"

SKIP_EXTENSIONS = frozenset([
    ".jpg", ".jpeg", ".png", ".gif",
    ".pdf", ".zip", ".tar", ".gz",
    ".exe", ".dll", ".so", ".dylib",
    ".bin", ".obj", ".o",
])
