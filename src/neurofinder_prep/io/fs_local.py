from pathlib import Path
from typing import Iterable, List, Optional, Union
from .fs_base import FSBase
from ..core.constants import IMAGE_EXTENSIONS, IMAGES_SUBDIR, LAYOUT_ROOTS, REGIONS_FILE

class LocalFS(FSBase):
    """On-disk layout, relative to the datasets directory:

      <id>.zip     downloaded archive
      <id>/        extracted archive
      <id>.json    manifest
    and, relative to the publish directory, <id>/images/ for sample frames.
    """

    def __init__(self, root: Union[str, Path], publish_root: Union[str, Path, None] = None) -> None:
        self.root = Path(root)
        self.publish_root = Path(publish_root) if publish_root is not None else self.root

    def archive_path(self, dataset_id: str) -> Path:
        return self.root / f"{dataset_id}.zip"

    def extract_dir(self, dataset_id: str) -> Path:
        return self.root / dataset_id

    def manifest_path(self, dataset_id: str) -> Path:
        return self.root / f"{dataset_id}.json"

    def publish_images_dir(self, dataset_id: str) -> Path:
        return self.publish_root / dataset_id / IMAGES_SUBDIR

    def _candidates(self, dataset_id: str, rel: str) -> Iterable[Path]:
        base = self.extract_dir(dataset_id)
        for layout in LAYOUT_ROOTS:
            root = base / layout.format(dataset_id=dataset_id) if layout else base
            yield root / rel

    def find_images_dir(self, dataset_id: str) -> Optional[Path]:
        for p in self._candidates(dataset_id, IMAGES_SUBDIR):
            if p.is_dir():
                return p
        return None

    def find_regions_file(self, dataset_id: str) -> Optional[Path]:
        # first hit wins, even if it turns out to be unparseable
        for p in self._candidates(dataset_id, REGIONS_FILE):
            if p.is_file():
                return p
        return None

    def list_frames(self, images_dir: Path) -> List[str]:
        return sorted(
            p.name for p in images_dir.iterdir()
            if p.is_file() and p.name.endswith(IMAGE_EXTENSIONS)
        )
