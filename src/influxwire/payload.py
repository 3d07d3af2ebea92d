# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Payload sources for write requests: in-memory bytes or a bounded readable stream."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

DEFAULT_CHUNK_SIZE = 64 * 1024


class Readable(Protocol):
    def read(self, size: int = -1, /) -> bytes: ...


class PayloadLengthError(ValueError):
    """A stream ended before delivering its declared length."""


class Payload(Protocol):
    """What the request builder needs from a payload."""

    @property
    def length(self) -> int: ...

    @property
    def bytes_sent(self) -> int: ...

    def body(self) -> bytes | Iterator[bytes]: ...


class BufferedPayload:
    """A fixed byte sequence sent as-is."""

    def __init__(self, data: bytes | bytearray | memoryview | str):
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._data = bytes(data)

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def bytes_sent(self) -> int:
        # A buffered body is handed to the transport whole.
        return len(self._data)

    def body(self) -> bytes:
        return self._data


class StreamPayload:
    """
    A readable source paired with a declared length.

    Bytes are pulled from the reader while the request is transmitted, in
    chunks of at most ``chunk_size``, and never past ``length``. ``bytes_sent``
    counts what has been handed to the transport so far.
    """

    def __init__(self, reader: Readable, length: int, *, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if length < 0:
            raise ValueError(f"declared length must not be negative, got {length}")
        if chunk_size <= 0:
            raise ValueError(f"chunk size must be positive, got {chunk_size}")
        self._reader = reader
        self._length = length
        self._chunk_size = chunk_size
        self._sent = 0

    @property
    def length(self) -> int:
        return self._length

    @property
    def bytes_sent(self) -> int:
        return self._sent

    def body(self) -> Iterator[bytes]:
        return self._iter_chunks()

    def _iter_chunks(self) -> Iterator[bytes]:
        while self._sent < self._length:
            want = min(self._chunk_size, self._length - self._sent)
            chunk = self._reader.read(want)
            if isinstance(chunk, str):
                raise TypeError("stream payload reader must return bytes, not str")
            if not chunk:
                raise PayloadLengthError(
                    f"stream ended after {self._sent} of {self._length} declared bytes"
                )
            # Readers may hand back more than asked for; never forward past the declared length.
            chunk = bytes(chunk[:want])
            self._sent += len(chunk)
            yield chunk


__all__ = [
    "BufferedPayload",
    "DEFAULT_CHUNK_SIZE",
    "Payload",
    "PayloadLengthError",
    "Readable",
    "StreamPayload",
]
