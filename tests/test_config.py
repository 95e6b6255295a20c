"""Configuration defaults and environment overrides."""

from __future__ import annotations

from pathlib import Path

import pytest

from neurofinder_prep.config import PrepareConfig, resolve_datasets
from neurofinder_prep.core.constants import DATASETS


def test_defaults() -> None:
    cfg = PrepareConfig()

    assert cfg.datasets_dir == Path("public/datasets")
    assert cfg.publish_root == cfg.datasets_dir
    assert cfg.max_frames == 100
    assert cfg.timeout is None
    assert len(cfg.datasets) == 19 and cfg.datasets[0] == "00.00" and cfg.datasets[-1] == "04.01"
    assert cfg.base_url.endswith("/challenges/neurofinder")


def test_from_env_overrides() -> None:
    cfg = PrepareConfig.from_env({
        "NEUROFINDER_DATASETS_DIR": "/data/nf",
        "NEUROFINDER_PUBLISH_DIR": "/srv/site/datasets",
        "NEUROFINDER_BASE_URL": "https://mirror.test/nf/",
        "NEUROFINDER_URL_PREFIX": "/static/",
        "NEUROFINDER_HTTP_TIMEOUT": "30",
    }, max_frames=None)

    assert cfg.datasets_dir == Path("/data/nf")
    assert cfg.publish_root == Path("/srv/site/datasets")
    assert cfg.base_url == "https://mirror.test/nf"
    assert cfg.url_prefix == "static"
    assert cfg.timeout == 30.0
    assert cfg.max_frames is None


def test_bad_timeout_is_rejected() -> None:
    with pytest.raises(ValueError, match="NEUROFINDER_HTTP_TIMEOUT"):
        PrepareConfig.from_env({"NEUROFINDER_HTTP_TIMEOUT": "soon"})


def test_negative_cap_is_rejected() -> None:
    with pytest.raises(ValueError):
        PrepareConfig(max_frames=-1)


def test_resolve_datasets_uses_explicit_ids_or_catalog() -> None:
    cfg = PrepareConfig(datasets=("a", "b"))

    assert resolve_datasets(["x"], cfg) == ("x",)
    assert resolve_datasets([], cfg) == ("a", "b")
    assert resolve_datasets((), PrepareConfig()) == DATASETS
