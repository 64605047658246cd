"""Compressed corpus store and decompression.

Each built language ships as one gzip blob, data/<code>.gz, inside the
package. The blob holds the UTF-8 word list, one word per line.

A blob that cannot be decompressed or decoded is a build defect, not a
runtime condition, so it raises CorpusIntegrityError and nothing in the
library catches it.
"""

import gzip
import io
import zlib
from importlib import resources

DATA_DIR = "data"
BLOB_SUFFIX = ".gz"
DEFAULT_BUFFER_SIZE = 4096


class CorpusIntegrityError(RuntimeError):
    """Shipped word data is corrupt or violates a corpus invariant."""


def _data_root():
    return resources.files(__package__).joinpath(DATA_DIR)


def blob_name(code: str) -> str:
    """File name of the blob for a language code."""
    return f"{code}{BLOB_SUFFIX}"


def available_codes() -> list[str]:
    """Language codes with a shipped blob, sorted."""
    root = _data_root()
    if not root.is_dir():
        return []
    return sorted(
        entry.name[: -len(BLOB_SUFFIX)]
        for entry in root.iterdir()
        if entry.name.endswith(BLOB_SUFFIX) and entry.is_file()
    )


def compressed_bytes(code: str) -> bytes:
    """Return the shipped compressed blob for a language code."""
    return _data_root().joinpath(blob_name(code)).read_bytes()


def decompress(blob: bytes, buffer_size: int = DEFAULT_BUFFER_SIZE) -> str:
    """Stream a gzip blob into text.

    Args:
        blob: gzip-compressed UTF-8 text.
        buffer_size: Maximum bytes pulled from the stream per read.

    Returns:
        The decoded text.

    Raises:
        CorpusIntegrityError: If the blob is not valid gzip or the payload
            is not valid UTF-8.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")

    chunks: list[bytes] = []
    try:
        with gzip.GzipFile(fileobj=io.BytesIO(blob), mode="rb") as stream:
            while True:
                chunk = stream.read(buffer_size)
                if not chunk:
                    break
                chunks.append(chunk)
    except (OSError, EOFError, zlib.error) as e:
        raise CorpusIntegrityError(f"Decompression failed: {e}") from e

    try:
        return b"".join(chunks).decode("utf-8")
    except UnicodeDecodeError as e:
        raise CorpusIntegrityError(
            f"Decompression resulted in invalid UTF-8: {e}"
        ) from e


def compress(text: str) -> bytes:
    """Compress word list text into a reproducible gzip blob."""
    return gzip.compress(text.encode("utf-8"), compresslevel=9, mtime=0)
