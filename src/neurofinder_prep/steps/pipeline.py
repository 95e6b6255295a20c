from __future__ import annotations
from typing import Iterable, List, Optional
import logging

import requests

from ..config import PrepareConfig
from ..core.errors import DatasetError
from ..core.models import PrepareResult
from ..core.statuses import Status
from ..io.fs_local import LocalFS
from .download import download_archive
from .extract import extract_archive
from .manifest import build_manifest, enumerate_frames, write_manifest
from .publish import copy_sample_frames

LOGGER = logging.getLogger(__name__)


def prepare_dataset(
    dataset_id: str,
    config: PrepareConfig,
    session: requests.Session,
    fs: Optional[LocalFS] = None,
) -> PrepareResult:
    """Download -> extract -> manifest -> sample copy for one dataset.

    An existing `<id>.json` means the dataset is done and nothing else is
    looked at. Any stage failure stops this dataset only; artifacts from
    stages that already finished stay on disk for the next run.
    """
    fs = fs or LocalFS(config.datasets_dir, config.publish_root)
    manifest_path = fs.manifest_path(dataset_id)
    if manifest_path.exists():
        LOGGER.info("%s: already processed (%s)", dataset_id, manifest_path.name)
        return PrepareResult(dataset_id, Status.SKIPPED)

    try:
        download_archive(dataset_id, fs, config, session)
        extract_archive(dataset_id, fs)
        images_dir, files = enumerate_frames(dataset_id, fs)
        manifest = build_manifest(dataset_id, files, fs, config.url_prefix)
        write_manifest(manifest, fs)
        copied = copy_sample_frames(dataset_id, images_dir, files, fs, config.max_frames)
    except DatasetError as e:
        LOGGER.error("%s: %s failed: %s", dataset_id, type(e).__name__, e.message)
        return PrepareResult(dataset_id, Status.FAILED, error=e.message)
    except OSError as e:
        LOGGER.error("%s: filesystem error: %s", dataset_id, e)
        return PrepareResult(dataset_id, Status.FAILED, error=str(e))

    return PrepareResult(dataset_id, Status.PROCESSED, frame_count=manifest.frame_count, copied=copied)


def prepare_datasets(
    dataset_ids: Iterable[str],
    config: PrepareConfig,
    session: Optional[requests.Session] = None,
) -> List[PrepareResult]:
    """Run `prepare_dataset` over `dataset_ids` one at a time, in order."""
    ids = list(dataset_ids)
    config.datasets_dir.mkdir(parents=True, exist_ok=True)
    fs = LocalFS(config.datasets_dir, config.publish_root)

    for dataset_id in ids:
        if dataset_id not in config.datasets:
            LOGGER.warning("%s: not in the known catalog (%s)", dataset_id, ", ".join(config.datasets))

    own_session = session is None
    session = session or requests.Session()
    results: List[PrepareResult] = []
    try:
        for dataset_id in ids:
            results.append(prepare_dataset(dataset_id, config, session, fs=fs))
    finally:
        if own_session:
            session.close()

    n_fail = sum(1 for r in results if r.status == Status.FAILED)
    LOGGER.info("prepared %d dataset(s), %d failed", len(results), n_fail)
    return results
