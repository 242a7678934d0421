from __future__ import annotations

import fnmatch
import logging
import shutil
import stat
import tarfile
import zipfile
from pathlib import Path

from ..errors import SetupError

logger = logging.getLogger(__name__)


def _make_executable(p: Path) -> None:
    p.chmod(p.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def extract_binary(archive: Path, member_glob: str, dest_dir: Path) -> Path:
    """Extract the first member matching member_glob into dest_dir, flattened.

    Supports .zip and .tar.gz/.tgz archives. The extracted file is chmod +x.
    """

    dest_dir.mkdir(parents=True, exist_ok=True)
    name = archive.name.lower()

    if name.endswith(".zip"):
        with zipfile.ZipFile(archive) as zf:
            for info in zf.infolist():
                if info.is_dir() or not fnmatch.fnmatch(info.filename, member_glob):
                    continue
                out = dest_dir / Path(info.filename).name
                with zf.open(info) as src, out.open("wb") as dst:
                    shutil.copyfileobj(src, dst)
                _make_executable(out)
                logger.info("Extracted %s -> %s", info.filename, out)
                return out
    elif name.endswith((".tar.gz", ".tgz")):
        with tarfile.open(archive, "r:gz") as tf:
            for member in tf.getmembers():
                if not member.isfile() or not fnmatch.fnmatch(member.name, member_glob):
                    continue
                src = tf.extractfile(member)
                if src is None:
                    continue
                out = dest_dir / Path(member.name).name
                with src, out.open("wb") as dst:
                    shutil.copyfileobj(src, dst)
                _make_executable(out)
                logger.info("Extracted %s -> %s", member.name, out)
                return out
    else:
        raise SetupError(f"Unsupported archive format: {archive}")

    raise SetupError(f"{member_glob} not found in {archive}")
