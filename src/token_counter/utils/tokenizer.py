# src/token_counter/utils/tokenizer.py
import tiktoken

from token_counter.exceptions import EncodingError


class Tokenizer:

    @staticmethod
    def get_encoding(model: str) -> "tiktoken.Encoding":
        """
        Resolves a model identifier to a tiktoken encoding.
        Accepts an encoding name (cl100k_base) or a model name (gpt-4o).
        tiktoken keeps loaded encodings in its own registry.
        """
        try:
            return tiktoken.get_encoding(model)
        except ValueError:
            pass

        try:
            return tiktoken.encoding_for_model(model)
        except KeyError:
            raise EncodingError(f"unknown model '{model}'") from None

    @staticmethod
    def count(data: bytes, model: str) -> int:
        """Counts the tokens in raw file contents, in a single encoder call."""
        encoding = Tokenizer.get_encoding(model)

        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError(f"content is not valid UTF-8 ({e.reason} at byte {e.start})") from e

        # Special-token markers in source files are plain text here
        return len(encoding.encode(text, disallowed_special=()))
