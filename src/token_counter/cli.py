# src/token_counter/cli.py
import sys
import argparse
import os

# Module imports
from token_counter.config import DEFAULT_MODEL, VERSION
from token_counter.core.report import print_report
from token_counter.core.scanner import RepositoryScanner
from token_counter.exceptions import EncodingError, ScanError
from token_counter.models import CommandOptions
from token_counter.utils.tokenizer import Tokenizer

TRUE_VALUES = {"1", "t", "true", "y", "yes"}
FALSE_VALUES = {"0", "f", "false", "n", "no"}

# flag name -> argparse dest, for every boolean flag
BOOL_FLAGS = {
    "gitignore": "gitignore",
    "files": "files",
    "no-hidden": "no_hidden",
    "file": "file",
}


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: '{value}'")


def _add_bool_flag(parser, name: str, default: bool, help: str):
    # A bare flag never takes the next argument; "-name=false" is split off in parse_args()
    parser.add_argument(
        f"-{name}", f"--{name}",
        dest=BOOL_FLAGS[name],
        action="store_const",
        const=True,
        default=default,
        help=f"{help}, -{name}=false to disable (default: {str(default).lower()})",
    )


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="token-counter",
        description="Count language-model tokens in a file or directory tree, by file, directory and total.",
        allow_abbrev=False,
    )
    parser.add_argument("root_dir", type=str, nargs="?", default=None,
                        help="Path to analyze when -path is not given (default: current directory)")
    parser.add_argument("-path", "--path", dest="path", type=str, default="",
                        help="Path to the file or directory to analyze")
    parser.add_argument("-model", "--model", dest="model", type=str, default=DEFAULT_MODEL,
                        help=f"Tokenizer encoding or model name (default: {DEFAULT_MODEL})")
    _add_bool_flag(parser, "gitignore", True, "Respect .gitignore rules at the root")
    _add_bool_flag(parser, "files", True, "Show individual file details")
    parser.add_argument("-min", "--min", dest="min", type=int, default=0,
                        help="Minimum token count for a file to be included (default: 0)")
    _add_bool_flag(parser, "no-hidden", True, "Ignore hidden files and directories (starting with .)")
    _add_bool_flag(parser, "file", False, "Treat the path as a single file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def parse_args(argv=None, parser=None):
    """
    Parses the command line the way Go's flag package reads booleans:
    "-name" sets the flag, "-name=<bool>" sets it explicitly, and a bare
    flag never consumes the argument after it.
    """
    parser = parser or create_arg_parser()
    argv = sys.argv[1:] if argv is None else list(argv)

    remaining = []
    explicit = {}
    for i, arg in enumerate(argv):
        if arg == "--":
            remaining.extend(argv[i:])
            break
        name, sep, value = arg.lstrip("-").partition("=")
        if arg.startswith("-") and sep and name in BOOL_FLAGS:
            try:
                explicit[BOOL_FLAGS[name]] = parse_bool(value)
            except argparse.ArgumentTypeError as e:
                parser.error(f"argument -{name}: {e}")
        else:
            remaining.append(arg)

    args = parser.parse_args(remaining)
    for dest, value in explicit.items():
        setattr(args, dest, value)
    return args


def options_from_args(args) -> CommandOptions:
    """Resolves the root: -path, then the positional argument, then the cwd."""
    path = args.path or args.root_dir or os.getcwd()
    return CommandOptions(
        path=path,
        model=args.model,
        respect_gitignore=args.gitignore,
        show_files=args.files,
        min_tokens=args.min,
        ignore_hidden=args.no_hidden,
        single_file=args.file,
    )


def main(argv=None):
    try:
        # 1. Setup
        args = parse_args(argv)

        try:
            options = options_from_args(args)
        except OSError as e:
            print(f"Error getting current directory: {e}", file=sys.stderr)
            sys.exit(1)

        try:
            Tokenizer.get_encoding(options.model)
        except EncodingError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        # 2. Scanning
        scanner = RepositoryScanner(options, tokenizer=Tokenizer)
        try:
            single_file = scanner.is_single_file()
            if single_file:
                print(f"Processing file: {options.path}")
                repo = scanner.scan_file()
            else:
                print(f"Processing directory: {options.path}")
                if options.respect_gitignore:
                    print("Respecting .gitignore rules if present")
                repo = scanner.scan_directory()
        except ScanError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        # 3. Report
        print()
        print_report(repo, show_files=options.show_files, single_file=single_file)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
