[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "torrentread"
version = "0.1.0"
description = "Read and inspect BitTorrent metainfo (.torrent) files"
requires-python = ">=3.10"
dependencies = []
keywords = ["bittorrent", "torrent", "bencode", "metainfo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: File Sharing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
torrentread = "torrentread.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["torrentread"]

[tool.pytest.ini_options]
addopts = "-ra"
