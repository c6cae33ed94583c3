"""Digest and size of the mar archive being advertised."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Union

_CHUNK_SIZE = 1024 * 1024


def hash_file(path: Union[str, Path], algorithm: str = "sha512") -> str:
    """Return the hex digest of a file, read in 1 MiB chunks."""
    h = hashlib.new(algorithm)
    with Path(path).open("rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
            h.update(chunk)
    return h.hexdigest()


def file_size(path: Union[str, Path]) -> int:
    return Path(path).stat().st_size
