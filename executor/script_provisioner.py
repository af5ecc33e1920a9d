"""Lazy installation of helper scripts required by OCR backends."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

logger = logging.getLogger("od.provisioner")

_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def ensure_script_installed(script_name: str, target_directory: Path, script_contents: str) -> Path:
    """Return the path of `script_name`, writing it first if it does not exist.

    An existing file is never overwritten so manual edits survive. New files
    are written to a sibling temp file and renamed into place, then marked
    executable. I/O errors propagate.
    """
    directory = Path(target_directory).expanduser().absolute()
    target = directory / script_name
    if target.exists():
        logger.debug("script already present: %s", target)
        return target

    directory.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{script_name}.", dir=directory)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(script_contents)
        mode = tmp_path.stat().st_mode | stat.S_IRUSR | stat.S_IWUSR | stat.S_IRGRP | stat.S_IROTH
        tmp_path.chmod(mode | _EXEC_BITS)
        os.replace(tmp_path, target)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    logger.info("installed helper script %s", target)
    return target
