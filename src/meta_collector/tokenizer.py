from __future__ import annotations

import codecs
from collections.abc import Iterator
from dataclasses import dataclass
from html.parser import HTMLParser
from typing import BinaryIO

START = "start"
END = "end"


@dataclass(frozen=True)
class TagEvent:
    kind: str
    tag: str
    attrs: tuple[tuple[str, str], ...] = ()

    def get(self, name: str) -> str:
        # Last occurrence wins for repeated attributes.
        value = ""
        for k, v in self.attrs:
            if k == name:
                value = v
        return value


class _TagCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.pending: list[TagEvent] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        norm = tuple((k.lower(), v or "") for k, v in attrs)
        self.pending.append(TagEvent(START, tag.lower(), norm))

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        # <meta ... /> and <link ... /> are void elements; no end event.
        self.handle_starttag(tag, attrs)

    def handle_endtag(self, tag: str) -> None:
        self.pending.append(TagEvent(END, tag.lower()))

    def drain(self) -> list[TagEvent]:
        out, self.pending = self.pending, []
        return out


def _read_chunks(doc: bytes | BinaryIO, chunk_size: int) -> Iterator[bytes]:
    if isinstance(doc, (bytes, bytearray, memoryview)):
        data = bytes(doc)
        for i in range(0, len(data), chunk_size):
            yield data[i : i + chunk_size]
        return
    while True:
        chunk = doc.read(chunk_size)
        if not chunk:
            return
        yield chunk


def iter_tag_events(doc: bytes | BinaryIO, *, chunk_size: int = 65536) -> Iterator[TagEvent]:
    """
    Tokenize an HTML byte stream into tag start/end events.

    Input is decoded as UTF-8 with replacement and fed in chunks, so callers can
    stop consuming early without reading the whole stream. Text, comments and
    doctypes are dropped. Exhausting the iterator means end of stream.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")

    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    parser = _TagCollector()
    for chunk in _read_chunks(doc, chunk_size):
        parser.feed(decoder.decode(chunk))
        yield from parser.drain()
    parser.feed(decoder.decode(b"", final=True))
    parser.close()
    yield from parser.drain()
