from __future__ import annotations
import logging, shutil, zipfile, zlib

from ..core.errors import ExtractionError
from ..io.fs_local import LocalFS

LOGGER = logging.getLogger(__name__)


def extract_archive(dataset_id: str, fs: LocalFS) -> bool:
    """Unpack `<id>.zip` into `<id>/` unless that directory already exists."""
    target = fs.extract_dir(dataset_id)
    if target.exists():
        LOGGER.info("%s: already extracted", dataset_id)
        return False

    archive = fs.archive_path(dataset_id)
    LOGGER.info("%s: extracting %s", dataset_id, archive.name)
    try:
        with zipfile.ZipFile(archive) as zf:
            zf.extractall(target)
            n = len(zf.namelist())
    except (zipfile.BadZipFile, zipfile.LargeZipFile, zlib.error, EOFError, OSError,
            NotImplementedError, RuntimeError) as e:
        # a half-written <id>/ would be mistaken for a finished extraction next run
        shutil.rmtree(target, ignore_errors=True)
        raise ExtractionError(dataset_id, "cannot extract {}: {}".format(archive.name, e)) from e

    LOGGER.info("%s: extracted %d entries", dataset_id, n)
    return True
