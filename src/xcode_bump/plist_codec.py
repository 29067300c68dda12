"""Reading and writing Info.plist files.

The format a file was read in (XML or binary) is kept on the returned
document and reused when the file is written back.
"""

import plistlib
from pathlib import Path
from typing import Union

from .exceptions import PlistReadError, PlistWriteError
from .logger import get_logger
from .models import PlistDocument

logger = get_logger()

BINARY_MAGIC = b"bplist00"


def detect_format(data: bytes) -> plistlib.PlistFormat:
    """Returns FMT_BINARY for binary plists, FMT_XML otherwise."""
    if data[: len(BINARY_MAGIC)] == BINARY_MAGIC:
        return plistlib.FMT_BINARY
    return plistlib.FMT_XML


def decode_plist(data: bytes, source: Union[Path, str] = "<bytes>") -> PlistDocument:
    """Decodes plist bytes into a document.

    Args:
        data: Raw file content.
        source: Name used in error messages.

    Returns:
        PlistDocument with the decoded dictionary and its format.

    Raises:
        PlistReadError: If plistlib fails on the content for any reason, or the
            root is not a dictionary.
    """
    fmt = detect_format(data)
    try:
        decoded = plistlib.loads(data, fmt=fmt)
    except Exception as e:
        raise PlistReadError(source, f"Failed to read the plist data: {e}") from e

    if not isinstance(decoded, dict):
        raise PlistReadError(source, f"Expected a dictionary at the plist root, got {type(decoded).__name__}")

    return PlistDocument(data=decoded, fmt=fmt)


def read_plist(path: Union[Path, str]) -> PlistDocument:
    """Reads and decodes a plist file.

    Raises:
        PlistReadError: If the file can't be read or decoded.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise PlistReadError(path, f"Failed to read the plist file: {e}") from e

    document = decode_plist(data, source=path)
    logger.debug("Read %s (%s)", path, "binary" if document.is_binary else "xml")
    return document


def encode_plist(document: PlistDocument) -> bytes:
    """Encodes a document in its own format, keeping key order."""
    return plistlib.dumps(document.data, fmt=document.fmt, sort_keys=False)


def write_plist(path: Union[Path, str], document: PlistDocument) -> None:
    """Encodes a document and overwrites the file.

    Raises:
        PlistWriteError: If encoding or writing fails.
    """
    path = Path(path)
    try:
        data = encode_plist(document)
    except (TypeError, ValueError, OverflowError) as e:
        raise PlistWriteError(path, f"Failed to encode the plist: {e}") from e

    try:
        path.write_bytes(data)
    except OSError as e:
        raise PlistWriteError(path, f"Failed to write the plist file: {e}") from e

    logger.debug("Wrote %d bytes to %s", len(data), path)
