"""
Module: catalog.sources

Purpose:
    Locate the images that go into a catalog: ask for a folder, keep the
    files that look like images, and sort them by filename.

Key Functions:
    - choose_folder(): Interactive folder prompt
    - is_image_candidate(): Extension test for one filename
    - list_image_files(): Filtered, sorted files in a folder
    - load_catalog_images(): CatalogImages for a list of paths

Dependencies:
    - PySide6: Folder dialog (imported lazily)
    - core.models.images: CatalogImage

Used By:
    - controller: Build pipeline
    - cli: Folder selection
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Union

from image_catalog.core.models import CatalogImage

logger = logging.getLogger(__name__)


# Matched case-sensitively, as given
IMAGE_EXTENSIONS: tuple[str, ...] = (
    ".jpg",
    ".jpeg",
    ".tif",
    ".tiff",
    ".psd",
    ".ai",
    ".png",
)

FOLDER_PROMPT = "Select the folder containing the images"

FolderChooser = Callable[[str], Optional[Union[str, Path]]]


class UserCancelled(Exception):
    """The folder prompt was dismissed without choosing a folder."""
    pass


def _qt_folder_dialog(prompt: str) -> Optional[str]:
    """Show a native folder picker and return the chosen directory."""
    from PySide6.QtWidgets import QApplication, QFileDialog

    app = QApplication.instance() or QApplication([])
    directory = QFileDialog.getExistingDirectory(
        None,
        prompt,
        "",
        QFileDialog.Option.ShowDirsOnly,
    )
    app.processEvents()
    return directory or None


def choose_folder(
    chooser: Optional[FolderChooser] = None,
    prompt: str = FOLDER_PROMPT,
) -> Path:
    """
    Ask the user for the folder holding the images.

    Args:
        chooser: Callable showing the prompt and returning a folder or
            None. Defaults to a PySide6 folder dialog.
        prompt: Prompt text

    Returns:
        The chosen folder

    Raises:
        UserCancelled: If no folder was chosen
    """
    chooser = chooser or _qt_folder_dialog
    folder = chooser(prompt)
    if not folder:
        raise UserCancelled("No folder selected")
    logger.debug(f"Selected folder: {folder}")
    return Path(folder)


def is_image_candidate(
    name: str,
    *,
    strict: bool = False,
    extensions: Sequence[str] = IMAGE_EXTENSIONS,
) -> bool:
    """
    Check whether a filename looks like an image.

    By default any occurrence of a known extension counts, so
    "photo.jpg.bak" and "scan.jpgx" match ".jpg". With ``strict`` only a
    trailing extension counts. Matching is case-sensitive either way.

    Examples:
        >>> is_image_candidate("a.jpg")
        True
        >>> is_image_candidate("a.jpgx")
        True
        >>> is_image_candidate("a.jpgx", strict=True)
        False
        >>> is_image_candidate("A.JPG")
        False
    """
    if strict:
        return any(name.endswith(ext) for ext in extensions)
    return any(ext in name for ext in extensions)


def list_image_files(
    folder: Union[str, Path],
    *,
    strict: bool = False,
) -> List[Path]:
    """
    List the image files in a folder, sorted by filename.

    Only regular files directly inside ``folder`` are considered. The
    sort is plain lexicographic on the name ("img10" before "img2").

    Args:
        folder: Folder to scan
        strict: Require the extension to end the filename

    Returns:
        Sorted list of matching paths

    Raises:
        FileNotFoundError: If the folder does not exist
        NotADirectoryError: If the path is not a folder
    """
    folder = Path(folder)
    if not folder.exists():
        raise FileNotFoundError(f"Image folder not found: {folder}")
    if not folder.is_dir():
        raise NotADirectoryError(f"Not a folder: {folder}")

    files = [
        p for p in folder.iterdir()
        if p.is_file() and is_image_candidate(p.name, strict=strict)
    ]
    files.sort(key=lambda p: p.name)
    logger.debug(f"Found {len(files)} image files in {folder}")
    return files


def load_catalog_images(paths: Iterable[Union[str, Path]]) -> List[CatalogImage]:
    """Wrap paths as CatalogImages, keeping their order."""
    return [CatalogImage.from_path(p) for p in paths]
