from pathlib import Path
from typing import List, Optional

class FSBase:
    def archive_path(self, dataset_id: str) -> Path:
        raise NotImplementedError
    def extract_dir(self, dataset_id: str) -> Path:
        raise NotImplementedError
    def manifest_path(self, dataset_id: str) -> Path:
        raise NotImplementedError
    def publish_images_dir(self, dataset_id: str) -> Path:
        raise NotImplementedError
    def find_images_dir(self, dataset_id: str) -> Optional[Path]:
        raise NotImplementedError
    def find_regions_file(self, dataset_id: str) -> Optional[Path]:
        raise NotImplementedError
    def list_frames(self, images_dir: Path) -> List[str]:
        raise NotImplementedError
