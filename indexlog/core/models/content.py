"""
Content models.

A Content value is a directory tree listing the files behind either the
source data of an index or the index output itself. Listings are taken as
given; nothing here touches a filesystem.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Literal

from pydantic import Field

from .base import FrozenStrMap, RecordModel, empty_map


class NoOpFingerprint(RecordModel):
    """Directory fingerprint that carries no information.

    Directory fingerprints are tagged by ``kind``; content-hash based
    variants can be added next to this one without changing the record
    shape.
    """

    kind: Literal["NoOp"] = "NoOp"
    properties: FrozenStrMap = Field(default_factory=empty_map)

    def __hash__(self) -> int:
        return hash((self.kind, tuple(sorted(self.properties.items()))))


# NoOp is the only directory fingerprint kind so far.
DirectoryFingerprint = NoOpFingerprint


class Directory(RecordModel):
    """One directory of a content tree and the file names it holds."""

    path: str
    files: tuple[str, ...] = Field(default_factory=tuple)
    fingerprint: DirectoryFingerprint = Field(default_factory=NoOpFingerprint)


class Content(RecordModel):
    """A directory tree rooted at ``root``.

    Equality and hashing are field-wise over the whole tree.
    """

    root: str
    directories: tuple[Directory, ...] = Field(default_factory=tuple)

    def iter_files(self) -> Iterator[str]:
        """Yield every listed file as ``<directory path>/<file name>``."""
        for directory in self.directories:
            base = directory.path.rstrip("/")
            for name in directory.files:
                yield f"{base}/{name}"

    @property
    def file_count(self) -> int:
        return sum(len(d.files) for d in self.directories)
