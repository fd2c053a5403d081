"""
GZIP output stream for the dense matrix.
"""

import gzip
import io
from contextlib import contextmanager

from .errors import ConfigError
from .parsing import ENCODING, ENCODING_ERRORS

DEFAULT_COMPRESS_LEVEL = 4


def validate_compress_level(compress_level):
    """Return the level as an int, raising ConfigError outside 1-9."""
    try:
        level = int(compress_level)
    except (TypeError, ValueError):
        raise ConfigError(f"Compression level must be an integer 1-9, got {compress_level!r}") from None
    if isinstance(compress_level, (bool, float)) or not 1 <= level <= 9:
        raise ConfigError(f"Compression level must be an integer 1-9, got {compress_level!r}")
    return level


@contextmanager
def open_compressed_sink(output_path, compress_level=DEFAULT_COMPRESS_LEVEL):
    """
    Open ``output_path`` as a buffered, gzip-compressed text stream.

    The gzip header carries no file name and a zero timestamp, so the same
    content at the same level always compresses to the same bytes. All
    layers are flushed and closed when the block exits, also on error.

    Args:
        output_path (Path): File to create (truncated if present)
        compress_level (int): GZIP level 1-9

    Yields:
        io.TextIOWrapper: Writer accepting str

    Raises:
        ConfigError: If the level is out of range
        OSError: If the file cannot be created or written
    """
    level = validate_compress_level(compress_level)

    with open(output_path, 'wb') as raw:
        with gzip.GzipFile(filename='', mode='wb', compresslevel=level,
                           fileobj=raw, mtime=0) as gz:
            writer = io.TextIOWrapper(gz, encoding=ENCODING,
                                      errors=ENCODING_ERRORS, newline='\n')
            try:
                yield writer
            finally:
                writer.close()
