"""Byte-for-byte copies of the workshop's record files."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Union

PathLike = Union[str, os.PathLike]


def backup_file(source: PathLike, destination: PathLike) -> Path:
    """Copy ``source`` to ``destination``, replacing it, and return the destination."""
    destination = Path(destination)
    with open(source, "rb") as reader, open(destination, "wb") as writer:
        shutil.copyfileobj(reader, writer, 4096)
    return destination