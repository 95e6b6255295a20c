from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import logging, shutil

from ..core.errors import PublishError
from ..io.fs_local import LocalFS

LOGGER = logging.getLogger(__name__)


def sample_size(frame_count: int, max_frames: Optional[int]) -> int:
    return frame_count if max_frames is None else min(frame_count, max_frames)


def copy_sample_frames(
    dataset_id: str,
    images_dir: Path,
    filenames: List[str],
    fs: LocalFS,
    max_frames: Optional[int],
) -> int:
    """Copy the first `max_frames` frames (all when None) into the publish directory.

    Skipped entirely when the publish directory already exists, whatever it
    holds; changing the cap later has no effect on a dataset once published.
    """
    dest_dir = fs.publish_images_dir(dataset_id)
    if dest_dir.exists():
        LOGGER.info("%s: publish directory exists, not copying (%s)", dataset_id, dest_dir)
        return 0

    n = sample_size(len(filenames), max_frames)
    try:
        dest_dir.mkdir(parents=True)
        for name in filenames[:n]:
            shutil.copy2(images_dir / name, dest_dir / name)
    except OSError as e:
        # a partial sample would never be repaired: the manifest is already written
        shutil.rmtree(dest_dir, ignore_errors=True)
        raise PublishError(dataset_id, "copy into {} failed: {}".format(dest_dir, e)) from e
    LOGGER.info("%s: copied %d sample frames", dataset_id, n)
    return n
