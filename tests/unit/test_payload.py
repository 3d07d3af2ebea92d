# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import io

import pytest

from influxwire.payload import BufferedPayload, PayloadLengthError, StreamPayload


class GreedyReader:
    """Ignores the requested size and returns everything it has."""

    def __init__(self, data: bytes):
        self._data = data
        self.calls = 0

    def read(self, size=-1):  # noqa: ARG002
        self.calls += 1
        data, self._data = self._data, b""
        return data


def test_buffered_payload_reports_length():
    payload = BufferedPayload(b"cpu value=99\n")
    assert payload.length == 13
    assert payload.body() == b"cpu value=99\n"
    assert payload.bytes_sent == 13

    assert BufferedPayload("mem used=1\n").body() == b"mem used=1\n"


def test_stream_payload_reads_in_bounded_chunks():
    reader = io.BytesIO(b"a" * 10 + b"TRAILING")
    payload = StreamPayload(reader, 10, chunk_size=4)

    chunks = list(payload.body())

    assert chunks == [b"aaaa", b"aaaa", b"aa"]
    assert payload.bytes_sent == 10
    # Nothing past the declared length was consumed.
    assert reader.read() == b"TRAILING"


def test_stream_payload_trims_oversized_reads():
    payload = StreamPayload(GreedyReader(b"cpu value=99\nextra"), 13)
    assert b"".join(payload.body()) == b"cpu value=99\n"
    assert payload.bytes_sent == 13


def test_stream_payload_fails_when_source_is_short():
    payload = StreamPayload(io.BytesIO(b"cpu"), 13)
    body = payload.body()
    assert next(body) == b"cpu"
    with pytest.raises(PayloadLengthError, match="3 of 13"):
        next(body)
    assert payload.bytes_sent == 3


def test_stream_payload_zero_length_reads_nothing():
    reader = GreedyReader(b"ignored")
    payload = StreamPayload(reader, 0)
    assert list(payload.body()) == []
    assert reader.calls == 0


def test_stream_payload_rejects_text_readers_and_bad_lengths():
    with pytest.raises(TypeError):
        list(StreamPayload(io.StringIO("cpu value=1\n"), 12).body())
    with pytest.raises(ValueError):
        StreamPayload(io.BytesIO(b""), -1)
    with pytest.raises(ValueError):
        StreamPayload(io.BytesIO(b""), 1, chunk_size=0)
