"""Reading the metadata held in a ``.torrent`` file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import BinaryIO

from torrentread.bencode import BencodeError, parse_bencode

logger = logging.getLogger(__name__)

_PIECE_HASH_SIZE = 20


class TorrentError(ValueError):
    """Raised when torrent data cannot be read or is not a valid torrent."""


@dataclass
class FileEntry:
    """One file of a multi-file torrent."""

    length: int = 0
    path: list[str] = field(default_factory=list)


@dataclass
class InfoDict:
    """The ``info`` dictionary of a torrent."""

    name: str = ""
    piece_length: int = 0
    pieces: bytes = b""
    length: int = 0
    files: list[FileEntry] = field(default_factory=list)


@dataclass
class Torrent:
    """The parsed content of a ``.torrent`` file."""

    announce: str = ""
    announce_list: list[list[str]] = field(default_factory=list)
    info: InfoDict = field(default_factory=InfoDict)

    def __str__(self) -> str:
        lines = ["=== Torrent Info ===", f"Announce: {self.announce}"]

        if self.announce_list:
            lines.append("Announce List:")
            lines.extend(f"  - {', '.join(tier)}" for tier in self.announce_list)

        info = self.info
        lines.append(f"Name: {info.name}")
        lines.append(f"Piece Length: {info.piece_length}")
        piece_count = len(info.pieces) // _PIECE_HASH_SIZE
        lines.append(f"Pieces: {piece_count} pieces ({len(info.pieces)} bytes total)")

        if info.files:
            lines.append("Files:")
            lines.extend(
                f"  - {'/'.join(entry.path)} ({entry.length} bytes)" for entry in info.files
            )
        else:
            lines.append(f"Single File Length: {info.length} bytes")

        return "\n".join(lines) + "\n"


def parse_torrent(reader: BinaryIO) -> Torrent:
    """Read all bytes from a binary stream and parse them as a torrent."""
    try:
        data = reader.read()
    except OSError as exc:
        raise TorrentError(f"failed to read torrent data: {exc}") from exc

    try:
        remaining, value = parse_bencode(data)
    except BencodeError as exc:
        raise TorrentError(f"failed to parse bencoded data: {exc}") from exc

    if remaining:
        logger.warning("unexpected extra data after parsing")

    if not isinstance(value, dict):
        logger.error("torrent data is not a dictionary")
        raise TorrentError("torrent data is not a dictionary")

    torrent = Torrent()

    announce = value.get("announce")
    if isinstance(announce, bytes):
        torrent.announce = _text(announce)

    announce_list = value.get("announce-list")
    if isinstance(announce_list, list):
        torrent.announce_list = [
            _strings(tier) for tier in announce_list if isinstance(tier, list)
        ]

    info = value.get("info")
    if not isinstance(info, dict):
        raise TorrentError("missing info dictionary in torrent data")
    torrent.info = _parse_info(info)

    return torrent


def _text(raw: bytes) -> str:
    return raw.decode("utf-8", "replace")


def _strings(items: list) -> list[str]:
    return [_text(item) for item in items if isinstance(item, bytes)]


def _parse_info(raw: dict) -> InfoDict:
    info = InfoDict()

    name = raw.get("name")
    if isinstance(name, bytes):
        info.name = _text(name)

    piece_length = raw.get("piece length")
    if isinstance(piece_length, int):
        info.piece_length = piece_length

    pieces = raw.get("pieces")
    if isinstance(pieces, bytes):
        info.pieces = pieces

    length = raw.get("length")
    if isinstance(length, int):
        info.length = length

    files = raw.get("files")
    if isinstance(files, list):
        info.files = [_parse_file(entry) for entry in files if isinstance(entry, dict)]

    return info


def _parse_file(raw: dict) -> FileEntry:
    entry = FileEntry()

    length = raw.get("length")
    if isinstance(length, int):
        entry.length = length

    path = raw.get("path")
    if isinstance(path, list):
        entry.path = _strings(path)

    return entry