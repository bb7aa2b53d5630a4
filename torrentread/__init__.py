"""Read and inspect BitTorrent metainfo files: a bencode parser, a torrent decoder and a command line."""

__version__ = "0.1.0"
__all__ = ["bencode", "torrent", "cli"]