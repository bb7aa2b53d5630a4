# torrentread

A small library and command-line tool for reading BitTorrent metainfo
(`.torrent`) files. It has a strict bencode parser and a decoder that turns a
torrent file into plain Python objects.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

Print a summary of a torrent file:

```
torrentread read ./path/to/file.torrent
```

Sample output:

```
=== Torrent Info ===
Announce: http://tracker.example.com/announce
Name: myfiles
Piece Length: 524288
Pieces: 2 pieces (40 bytes total)
Files:
  - file1.txt (12345 bytes)
  - file2.txt (67890 bytes)
```

Single-file torrents show a `Single File Length: N bytes` line instead of the
file list, and an `Announce List:` section is printed when the torrent has
one.

The `-v` / `--verbose` flag, given before the command, turns on debug-level
logging. Without a command the help text is printed. If the path is missing,
the file cannot be opened or the data is not a valid torrent, a message is
written to standard error and the exit status is 1.

## Library

### Bencode (`torrentread.bencode`)

`parse_bencode(data)` parses a single bencoded value from the start of a
`bytes` object. It returns a tuple of the bytes left over after the value and
the value itself. Integers come back as `int`, strings as `bytes`, lists as
`list` and dictionaries as `dict` keyed by `str` (keys are decoded as UTF-8
with `surrogateescape`). Malformed input, such as leading zeros, `-0`,
negative string lengths, or unterminated lists and dictionaries, raises
`BencodeError`, a subclass of `ValueError`.

```python
from torrentread.bencode import parse_bencode, format_value

rest, value = parse_bencode(b"d2:abli1ei2ei3eee")
# value == {"ab": [1, 2, 3]}, rest == b""

print(format_value(value))
```

`format_value(value, indent=0)` returns an indented, human-readable dump of a
decoded value. Strings longer than 20 bytes are cut short and marked
`... (truncated)`, and strings with non-printable bytes are shown as hex.

### Torrent files (`torrentread.torrent`)

`parse_torrent(reader)` reads a whole binary stream and returns a `Torrent`
with `announce`, `announce_list` and `info`. The `info` field is an
`InfoDict` (`name`, `piece_length`, `pieces`, `length`, `files`), and
multi-file torrents list their contents as `FileEntry` objects (`length`,
`path`). If the stream cannot be read, the data is not bencode, is not a
dictionary, or has no `info` dictionary, the function raises `TorrentError`,
a subclass of `ValueError`. Trailing bytes after the top-level value are
logged as a warning.

```python
from torrentread.torrent import parse_torrent

with open("file.torrent", "rb") as fh:
    torrent = parse_torrent(fh)

print(torrent.announce)
print(torrent.info.name, torrent.info.piece_length)
for entry in torrent.info.files:
    print("/".join(entry.path), entry.length)

print(torrent)  # same summary as the command line
```

## What it does not do

torrentread only reads metainfo. It does not download or seed content,
contact trackers or peers, check piece hashes, compute info hashes, or write
bencode or torrent files.