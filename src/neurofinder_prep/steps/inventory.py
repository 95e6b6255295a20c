from __future__ import annotations
from json import JSONDecodeError
from typing import Dict, Iterable, List, Optional
import logging

import polars as pl

from ..core.models import PrepareResult
from ..io.fs_local import LocalFS
from ..utils import read_json

LOGGER = logging.getLogger(__name__)

STATUS_SCHEMA = {
    "dataset_id": pl.Utf8, "zip": pl.Boolean, "extracted": pl.Boolean,
    "manifest": pl.Boolean, "frame_count": pl.Int64, "published": pl.Int64,
}
RESULT_SCHEMA = {
    "dataset_id": pl.Utf8, "status": pl.Utf8, "frame_count": pl.Int64,
    "copied": pl.Int64, "error": pl.Utf8,
}


def _manifest_frame_count(fs: LocalFS, dataset_id: str) -> Optional[int]:
    mp = fs.manifest_path(dataset_id)
    if not mp.exists():
        return None
    try:
        return int(read_json(mp)["frameCount"])
    except (JSONDecodeError, KeyError, TypeError, ValueError, OSError) as e:
        LOGGER.warning("%s: unreadable manifest %s (%s)", dataset_id, mp, e)
        return None


def _published_count(fs: LocalFS, dataset_id: str) -> int:
    d = fs.publish_images_dir(dataset_id)
    if not d.is_dir():
        return 0
    return sum(1 for p in d.iterdir() if p.is_file())


def dataset_status(dataset_ids: Iterable[str], fs: LocalFS) -> pl.DataFrame:
    """On-disk state of each dataset; never touches the network."""
    rows: List[Dict[str, object]] = []
    for dataset_id in dataset_ids:
        rows.append({
            "dataset_id": dataset_id,
            "zip": fs.archive_path(dataset_id).exists(),
            "extracted": fs.extract_dir(dataset_id).is_dir(),
            "manifest": fs.manifest_path(dataset_id).exists(),
            "frame_count": _manifest_frame_count(fs, dataset_id),
            "published": _published_count(fs, dataset_id),
        })
    return pl.DataFrame(rows, schema=STATUS_SCHEMA)


def results_frame(results: Iterable[PrepareResult]) -> pl.DataFrame:
    return pl.DataFrame([r.to_row() for r in results], schema=RESULT_SCHEMA)
