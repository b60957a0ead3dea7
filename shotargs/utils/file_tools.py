"""Output filename helpers."""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Optional

from PIL import Image

logger = logging.getLogger(__name__)

THUMBNAIL_SUFFIX = "-thumb"


def name_thumbnail(name: str) -> str:
    """Return the companion thumbnail filename for ``name``.

    ``-thumb`` goes before the last dot of the file name, so ``shot.png``
    becomes ``shot-thumb.png`` and ``.shot`` becomes ``-thumb.shot``. A name
    without a dot gets the suffix appended. Dots in directory names are
    ignored.
    """

    dot = name.rfind(".")
    if dot <= name.rfind("/"):
        return f"{name}{THUMBNAIL_SUFFIX}"
    return f"{name[:dot]}{THUMBNAIL_SUFFIX}{name[dot:]}"


def output_format(name: str) -> Optional[str]:
    """Return the Pillow format name matching the file extension, if known."""

    ext = PurePath(name).suffix.lower()
    if not ext:
        return None
    fmt = Image.registered_extensions().get(ext)
    if fmt is None:
        logger.debug("No image format registered for extension %s", ext)
    return fmt
