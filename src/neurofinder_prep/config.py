from __future__ import annotations
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional, Sequence, Tuple
import os

from .core.constants import (
    DATASETS,
    DEFAULT_DATASETS_DIR,
    DEFAULT_MAX_FRAMES,
    DEFAULT_URL_PREFIX,
    DOWNLOAD_CHUNK_BYTES,
    NEUROFINDER_BASE_URL,
    ENV_BASE_URL,
    ENV_DATASETS_DIR,
    ENV_HTTP_TIMEOUT,
    ENV_PUBLISH_DIR,
    ENV_URL_PREFIX,
)


@dataclass(frozen=True)
class PrepareConfig:
    """Everything the preparer needs; no module-level state is consulted at run time.

    ``publish_dir`` defaults to ``datasets_dir``, so published frames land in
    ``<datasets_dir>/<id>/images`` next to the extracted archive.
    ``max_frames=None`` copies every frame.
    """
    datasets_dir: Path = Path(DEFAULT_DATASETS_DIR)
    publish_dir: Optional[Path] = None
    base_url: str = NEUROFINDER_BASE_URL
    url_prefix: str = DEFAULT_URL_PREFIX
    max_frames: Optional[int] = DEFAULT_MAX_FRAMES
    datasets: Tuple[str, ...] = DATASETS
    timeout: Optional[float] = None
    chunk_size: int = DOWNLOAD_CHUNK_BYTES
    show_progress: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "datasets_dir", Path(self.datasets_dir))
        if self.publish_dir is not None:
            object.__setattr__(self, "publish_dir", Path(self.publish_dir))
        object.__setattr__(self, "datasets", tuple(self.datasets))
        if self.max_frames is not None and self.max_frames < 0:
            raise ValueError("max_frames must be >= 0 (or None for all frames)")

    @property
    def publish_root(self) -> Path:
        return self.publish_dir if self.publish_dir is not None else self.datasets_dir

    def with_frame_limit(self, max_frames: Optional[int]) -> "PrepareConfig":
        return replace(self, max_frames=max_frames)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "PrepareConfig":
        env = os.environ if environ is None else environ
        kwargs = {}
        if env.get(ENV_DATASETS_DIR):
            kwargs["datasets_dir"] = Path(env[ENV_DATASETS_DIR])
        if env.get(ENV_PUBLISH_DIR):
            kwargs["publish_dir"] = Path(env[ENV_PUBLISH_DIR])
        if env.get(ENV_BASE_URL):
            kwargs["base_url"] = env[ENV_BASE_URL].rstrip("/")
        if env.get(ENV_URL_PREFIX):
            kwargs["url_prefix"] = env[ENV_URL_PREFIX].strip("/")
        if env.get(ENV_HTTP_TIMEOUT):
            try:
                kwargs["timeout"] = float(env[ENV_HTTP_TIMEOUT])
            except ValueError as e:
                raise ValueError("{} must be a number of seconds".format(ENV_HTTP_TIMEOUT)) from e
        kwargs.update(overrides)
        return cls(**kwargs)


def resolve_datasets(requested: Sequence[str], config: PrepareConfig) -> Tuple[str, ...]:
    """Explicit identifiers win; otherwise the configured catalog."""
    return tuple(requested) if requested else config.datasets
