"""Parsing and pretty-printing of bencoded data.

Decoded values map onto plain Python types:

* integers become ``int``
* byte strings become ``bytes``
* lists become ``list``
* dictionaries become ``dict`` with ``str`` keys

Dictionary keys are decoded as UTF-8 with ``surrogateescape``, so keys that
are not valid UTF-8 still round-trip to their original bytes.
"""

from __future__ import annotations

import re
from typing import Union

BValue = Union[int, bytes, list, dict]

_INT_PREFIX = ord("i")
_LIST_PREFIX = ord("l")
_DICT_PREFIX = ord("d")
_END = ord("e")
_MINUS = ord("-")
_ZERO = ord("0")

_DIGITS = re.compile(rb"[0-9]*")
_SIGNED_DECIMAL = re.compile(rb"[+-]?[0-9]+")

_STRING_DISPLAY_LIMIT = 20


class BencodeError(ValueError):
    """Raised when input is not valid bencode."""


def parse_bencode(data: bytes) -> tuple[bytes, BValue]:
    """Parse one bencoded value from the start of ``data``.

    Returns the bytes left over after the value, and the value itself.
    Raises :class:`BencodeError` if the input is malformed.
    """
    buf = bytes(data)
    value, end = _parse_value(buf, 0)
    return buf[end:], value


def format_value(value: BValue, indent: int = 0) -> str:
    """Render a decoded value as an indented, human-readable tree."""
    pad = "  " * indent

    if isinstance(value, int):
        return f"{pad}[Int] {value}\n"

    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
        display = raw[:_STRING_DISPLAY_LIMIT]
        if _is_printable(display):
            text = f'{pad}[String] "{display.decode("ascii")}"'
        else:
            text = f"{pad}[String] 0x{display.hex()}"
        if len(raw) > _STRING_DISPLAY_LIMIT:
            text += "... (truncated)"
        return text + "\n"

    if isinstance(value, list):
        items = "".join(format_value(item, indent + 1) for item in value)
        return f"{pad}[List] (\n{items}{pad})\n"

    if isinstance(value, dict):
        entries = "".join(
            f'{pad}  Key: "{key}"\n' + format_value(item, indent + 1)
            for key, item in value.items()
        )
        return f"{pad}[Dict] {{\n{entries}{pad}}}\n"

    return f"{pad}[Unknown Type]\n"


def _is_printable(data: bytes) -> bool:
    return all(32 <= byte <= 126 for byte in data)


def _snippet(data: bytes) -> str:
    return data.decode("latin-1")


def _to_int(text: bytes, bits: int) -> int:
    """Parse a signed decimal that must fit in a ``bits``-wide integer."""
    if not _SIGNED_DECIMAL.fullmatch(text):
        raise ValueError(f"invalid decimal: {text!r}")
    number = int(text)
    limit = 1 << (bits - 1)
    if not -limit <= number < limit:
        raise ValueError(f"decimal out of range: {text!r}")
    return number


def _parse_value(buf: bytes, pos: int) -> tuple[BValue, int]:
    if pos >= len(buf):
        raise BencodeError("empty input")

    lead = buf[pos]
    if lead == _INT_PREFIX:
        return _parse_int(buf, pos)
    if lead == _LIST_PREFIX:
        return _parse_list(buf, pos)
    if lead == _DICT_PREFIX:
        return _parse_dict(buf, pos)
    if buf[pos:pos + 1].isdigit():
        return _parse_string(buf, pos)
    raise BencodeError(f"bad payload: unexpected character '{chr(lead)}'")


def _parse_int(buf: bytes, pos: int) -> tuple[int, int]:
    size = len(buf)
    if size - pos < 3 or buf[pos] != _INT_PREFIX:
        raise BencodeError("bad payload: invalid integer encoding")

    start = pos + 1
    i = start

    if buf[i] == _MINUS:
        i += 1
        if i >= size or buf[i] == _ZERO:
            raise BencodeError(
                "bad payload: expected valid digit after '-', "
                f"at '{_snippet(buf[start:i])}...'"
            )

    if buf[i] == _ZERO and i + 1 < size and buf[i + 1] != _END:
        raise BencodeError(
            f"bad payload: leading zeros in integer at '{_snippet(buf[start:i + 2])}...'"
        )

    i = _DIGITS.match(buf, i).end()

    if i >= size or buf[i] != _END:
        raise BencodeError(
            f"bad payload: expected 'e' at end of integer, at '{_snippet(buf[start:i])}...'"
        )

    try:
        number = _to_int(buf[start:i], 64)
    except ValueError as exc:
        raise BencodeError(
            f"bad payload: failed to parse integer at '{_snippet(buf[start:i])}...'"
        ) from exc

    return number, i + 1


def _parse_string(buf: bytes, pos: int) -> tuple[bytes, int]:
    colon = buf.find(b":", pos)
    if colon < 0:
        raise BencodeError("bad payload: missing ':' in string encoding")

    try:
        length = _to_int(buf[pos:colon], 32)
    except ValueError as exc:
        raise BencodeError("bad payload: failed to parse string length") from exc
    if length < 0:
        raise BencodeError("bad payload: negative string length")

    start = colon + 1
    end = start + length
    if end > len(buf):
        raise BencodeError("bad payload: string length exceeds available data")

    return buf[start:end], end


def _parse_list(buf: bytes, pos: int) -> tuple[list, int]:
    size = len(buf)
    if size - pos < 2 or buf[pos] != _LIST_PREFIX:
        raise BencodeError("bad payload: invalid list encoding")

    values: list = []
    i = pos + 1
    while i < size and buf[i] != _END:
        try:
            item, i = _parse_value(buf, i)
        except BencodeError as exc:
            raise BencodeError("bad payload: cannot parse list element") from exc
        values.append(item)

    if i >= size:
        raise BencodeError("bad payload: list not terminated with 'e'")

    return values, i + 1


def _parse_dict(buf: bytes, pos: int) -> tuple[dict, int]:
    size = len(buf)
    if size - pos < 2 or buf[pos] != _DICT_PREFIX:
        raise BencodeError("bad payload: invalid dictionary encoding")

    result: dict = {}
    i = pos + 1
    while i < size and buf[i] != _END:
        raw_key, i = _parse_string(buf, i)
        item, i = _parse_value(buf, i)
        result[raw_key.decode("utf-8", "surrogateescape")] = item

    if i >= size:
        raise BencodeError("bad payload: dictionary not terminated with 'e'")

    return result, i + 1