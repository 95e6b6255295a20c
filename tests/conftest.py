"""Shared fakes: synthetic Neurofinder archives and an offline HTTP session."""

from __future__ import annotations

import io
import json
import struct
import zipfile
from pathlib import Path
from typing import Dict, List, Optional, Union

import pytest
import requests

from neurofinder_prep.config import PrepareConfig

BASE_URL = "https://example.test/challenges/neurofinder"


def make_zip(entries: Dict[str, Union[bytes, str]]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
    return buf.getvalue()


def corrupt_deflate_zip() -> bytes:
    """Valid central directory; the second entry's deflate stream is overwritten."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("images/a.tif", b"a" * 4096)
        zf.writestr("images/b.tif", b"b" * 4096)
    data = bytearray(buf.getvalue())
    with zipfile.ZipFile(io.BytesIO(bytes(data))) as zf:
        offset = zf.getinfo("images/b.tif").header_offset
    name_len, extra_len = struct.unpack("<HH", data[offset + 26:offset + 30])
    start = offset + 30 + name_len + extra_len
    # 0xFF opens a deflate block with the reserved block type
    data[start:start + 8] = b"\xff" * 8
    return bytes(data)


def neurofinder_zip(n_frames: int, root: str = "", regions: Optional[object] = None) -> bytes:
    """Archive with `n_frames` TIFF-named frames under `<root>/images/`."""
    prefix = f"{root}/" if root else ""
    entries: Dict[str, Union[bytes, str]] = {
        f"{prefix}images/image{i:05d}.tiff": f"frame-{i}".encode() for i in range(n_frames)
    }
    if regions is not None:
        entries[f"{prefix}regions/regions.json"] = json.dumps(regions)
    return make_zip(entries)


class FakeResponse:
    def __init__(self, status_code: int = 200, content: bytes = b"",
                 fail_after: Optional[int] = None) -> None:
        self.status_code = status_code
        self.content = content
        self.headers = {"content-length": str(len(content))}
        self.fail_after = fail_after
        self.closed = False

    def iter_content(self, chunk_size: int = 1):
        for n, i in enumerate(range(0, len(self.content), chunk_size)):
            if self.fail_after is not None and n >= self.fail_after:
                raise requests.ConnectionError("connection reset")
            yield self.content[i:i + chunk_size]

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class FakeSession:
    """Serves archives by dataset id; anything unknown is a 404."""

    def __init__(self, archives: Optional[Dict[str, object]] = None) -> None:
        self.archives = dict(archives or {})
        self.calls: List[str] = []
        self.closed = False

    def get(self, url: str, stream: bool = False, timeout=None):
        self.calls.append(url)
        for dataset_id, served in self.archives.items():
            if url == f"{BASE_URL}/neurofinder.{dataset_id}.zip":
                if isinstance(served, Exception):
                    raise served
                if isinstance(served, FakeResponse):
                    return served
                return FakeResponse(200, served)
        return FakeResponse(404, b"not found")

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def datasets_dir(tmp_path: Path) -> Path:
    return tmp_path / "public" / "datasets"


@pytest.fixture
def config(datasets_dir: Path) -> PrepareConfig:
    return PrepareConfig(
        datasets_dir=datasets_dir,
        base_url=BASE_URL,
        datasets=("00.00", "00.01", "01.00"),
    )
