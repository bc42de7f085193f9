from __future__ import annotations

import shutil
from pathlib import Path


def copy_file(src: Path | str, dst: Path | str) -> None:
    """Copy the bytes of ``src`` into ``dst``, creating or truncating it.

    The source is opened first, so a missing source never leaves an empty
    destination behind. Mode, owner and timestamps are not carried over.

    Raises:
        shutil.SameFileError: If ``src`` and ``dst`` are the same file,
            including links to it. ``dst`` is left untouched.
        OSError: The first error from opening, creating or copying.
    """
    shutil.copyfile(src, dst)
