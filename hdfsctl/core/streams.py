"""Byte stream helpers used by the upload path."""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO, Protocol

BUFFER_SIZE = 4096


class Writable(Protocol):
    def write(self, data: bytes) -> int | None: ...

    def flush(self) -> None: ...


def iter_chunks(stream: BinaryIO, size: int = BUFFER_SIZE) -> Iterator[bytes]:
    """Yield successive reads of at most ``size`` bytes until end of stream."""
    while True:
        chunk = stream.read(size)
        if not chunk:
            return
        yield chunk


def copy_stream(source: BinaryIO, target: Writable, buffer_size: int = BUFFER_SIZE) -> int:
    """Copy ``source`` into ``target`` and flush it.

    Reads may come back short; only the bytes actually read are written, and
    the loop ends at end of stream.

    Args:
        source: Readable binary stream.
        target: Writable stream.
        buffer_size: Maximum bytes per read.

    Returns:
        Number of bytes copied.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")

    copied = 0
    for chunk in iter_chunks(source, buffer_size):
        target.write(chunk)
        copied += len(chunk)
    target.flush()
    return copied
