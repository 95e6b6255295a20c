from __future__ import annotations
from pathlib import Path
import logging, os

import requests
from tqdm import tqdm

from ..config import PrepareConfig
from ..core.constants import ARCHIVE_NAME
from ..core.errors import DownloadError
from ..io.fs_local import LocalFS

LOGGER = logging.getLogger(__name__)


def archive_url(base_url: str, dataset_id: str) -> str:
    return "{}/{}".format(base_url.rstrip("/"), ARCHIVE_NAME.format(dataset_id=dataset_id))


def _discard(p: Path) -> None:
    try:
        p.unlink()
    except FileNotFoundError:
        pass


def download_archive(dataset_id: str, fs: LocalFS, config: PrepareConfig, session: requests.Session) -> bool:
    """Fetch `<id>.zip` unless it is already on disk.

    Returns True when a download happened. The body is streamed into a
    `.part` sibling and renamed on completion, so a failed transfer never
    leaves a `<id>.zip` that a later run would mistake for a finished one.
    """
    dest = fs.archive_path(dataset_id)
    if dest.exists():
        LOGGER.info("%s: archive already present (%s)", dataset_id, dest.name)
        return False

    url = archive_url(config.base_url, dataset_id)
    LOGGER.info("%s: downloading %s", dataset_id, url)
    dest.parent.mkdir(parents=True, exist_ok=True)
    part = dest.with_suffix(dest.suffix + ".part")
    try:
        with session.get(url, stream=True, timeout=config.timeout) as resp:
            if resp.status_code != 200:
                raise DownloadError(dataset_id, "HTTP {} from {}".format(resp.status_code, url))
            total = int(resp.headers.get("content-length") or 0) or None
            with open(part, "wb") as f, tqdm(
                total=total, unit="B", unit_scale=True, desc=dataset_id,
                disable=not config.show_progress, leave=False,
            ) as bar:
                for chunk in resp.iter_content(chunk_size=config.chunk_size):
                    if not chunk:
                        continue
                    f.write(chunk)
                    bar.update(len(chunk))
    except DownloadError:
        _discard(part)
        raise
    except (requests.RequestException, OSError) as e:
        _discard(part)
        raise DownloadError(dataset_id, "{}: {}".format(type(e).__name__, e)) from e

    os.replace(part, dest)
    LOGGER.info("%s: downloaded %d bytes", dataset_id, dest.stat().st_size)
    return True
