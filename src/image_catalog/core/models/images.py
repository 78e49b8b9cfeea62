"""
Module: images

Purpose:
    CatalogImage - one source image file and the caption derived from it.

Key Functions:
    - display_name(): Caption text for a file path
    - CatalogImage.from_path(): Build an image reference from a path

Dependencies:
    - pathlib (std)

Used By:
    - catalog.sources: Builds CatalogImages from the file listing
    - catalog.builder: Places images and captions
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union


def display_name(path: Union[str, Path]) -> str:
    """
    Derive the caption for an image file.

    Strips the directory (either separator), then a single trailing
    extension. Only the segment after the last dot is removed. Names with
    no dot, or whose only dot is the leading one, are returned whole.

    Examples:
        >>> display_name("/a/b/photo.final.JPG")
        'photo.final'
        >>> display_name("noext")
        'noext'
        >>> display_name("C:\\\\scans\\\\plate_01.tif")
        'plate_01'
    """
    name = re.split(r"[\\/]", str(path))[-1]
    stem, dot, _ = name.rpartition(".")
    if not dot or not stem:
        return name
    return stem


@dataclass(frozen=True)
class CatalogImage:
    """
    Reference to a source image file (immutable).

    Attributes:
        path: Location of the image file
        display_name: Caption shown under the image
    """

    path: Path
    display_name: str

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> CatalogImage:
        return cls(path=Path(path), display_name=display_name(path))

    @property
    def filename(self) -> str:
        return self.path.name
