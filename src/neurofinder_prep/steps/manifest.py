from __future__ import annotations
from json import JSONDecodeError
from pathlib import Path
from typing import Any, List, Tuple
import logging

from ..core.errors import ImagesNotFoundError, RegionsError
from ..core.models import DatasetManifest, FrameEntry, NO_REGIONS
from ..io.fs_local import LocalFS
from ..utils import read_json, write_atomic_json

LOGGER = logging.getLogger(__name__)


def enumerate_frames(dataset_id: str, fs: LocalFS) -> Tuple[Path, List[str]]:
    images_dir = fs.find_images_dir(dataset_id)
    if images_dir is None:
        raise ImagesNotFoundError(dataset_id, "no images directory in {}".format(fs.extract_dir(dataset_id)))
    files = fs.list_frames(images_dir)
    LOGGER.info("%s: found %d frames in %s", dataset_id, len(files), images_dir)
    return images_dir, files


def frame_path(url_prefix: str, dataset_id: str, filename: str) -> str:
    parts = [url_prefix.strip("/"), dataset_id, "images", filename]
    return "/".join(p for p in parts if p)


def frame_entries(dataset_id: str, filenames: List[str], url_prefix: str) -> List[FrameEntry]:
    # list order is frame order; index is the position, nothing else
    return [
        FrameEntry(index=i, filename=f, path=frame_path(url_prefix, dataset_id, f))
        for i, f in enumerate(filenames)
    ]


def load_regions(dataset_id: str, fs: LocalFS) -> Any:
    rp = fs.find_regions_file(dataset_id)
    if rp is None:
        return NO_REGIONS
    try:
        regions = read_json(rp)
    except (JSONDecodeError, UnicodeDecodeError, OSError) as e:
        raise RegionsError(dataset_id, "unreadable regions file {}: {}".format(rp, e)) from e
    LOGGER.info("%s: attached regions from %s", dataset_id, rp)
    return regions


def build_manifest(dataset_id: str, filenames: List[str], fs: LocalFS, url_prefix: str) -> DatasetManifest:
    return DatasetManifest(
        dataset_id=dataset_id,
        frames=frame_entries(dataset_id, filenames, url_prefix),
        regions=load_regions(dataset_id, fs),
    )


def write_manifest(manifest: DatasetManifest, fs: LocalFS) -> Path:
    out = fs.manifest_path(manifest.dataset_id)
    write_atomic_json(manifest.to_dict(), out)
    LOGGER.info("%s: wrote manifest %s", manifest.dataset_id, out.name)
    return out
