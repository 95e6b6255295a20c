from dataclasses import dataclass
from typing import Optional, List, Dict, Any
from .statuses import Status

NO_REGIONS = object()

@dataclass(frozen=True)
class FrameEntry:
    index: int
    filename: str
    path: str

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.index, "filename": self.filename, "path": self.path}



@dataclass(frozen=True)
class DatasetManifest:
    dataset_id: str
    frames: List[FrameEntry]
    # Opaque; copied verbatim from the archive. Absent != null.
    regions: Any = NO_REGIONS

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    @property
    def has_regions(self) -> bool:
        return self.regions is not NO_REGIONS

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "datasetId": self.dataset_id,
            "frameCount": self.frame_count,
            "frames": [f.to_dict() for f in self.frames],
        }
        if self.has_regions:
            out["regions"] = self.regions
        return out


@dataclass(frozen=True)
class PrepareResult:
    dataset_id: str
    status: Status
    frame_count: Optional[int] = None
    copied: int = 0
    error: Optional[str] = None

    def to_row(self) -> Dict[str, Any]:
        return {
            "dataset_id": self.dataset_id,
            "status": self.status.value,
            "frame_count": self.frame_count,
            "copied": self.copied,
            "error": self.error,
        }
