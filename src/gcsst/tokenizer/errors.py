"""Tokenizer error types."""


class ParseError(Exception):
    """Raised when CSS source cannot be tokenized into well-formed blocks."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
