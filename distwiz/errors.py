"""
Error types raised by distwiz.

I/O failures are not wrapped: the built-in OSError (IOError) propagates
unchanged so callers keep the errno and file name.
"""


class DistwizError(Exception):
    """Base class for all distwiz errors."""


class FormatError(DistwizError, ValueError):
    """
    A line of the sparse input could not be tokenized.

    Args:
        message: Description of the problem
        path: Input file the line came from
        line_number: 1-based line number
        line: Raw line content
    """

    def __init__(self, message, path=None, line_number=None, line=None):
        self.path = path
        self.line_number = line_number
        self.line = line

        location = []
        if path is not None:
            location.append(str(path))
        if line_number is not None:
            location.append(f"line {line_number}")
        if location:
            message = f"{':'.join(location)}: {message}"
        if line is not None:
            message = f"{message}: {line.rstrip()!r}"

        super().__init__(message)


class ConfigError(DistwizError):
    """Invalid or missing run configuration."""
