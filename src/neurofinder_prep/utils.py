from __future__ import annotations
from pathlib import Path
from typing import Any
import json, os

def write_atomic_json(obj: Any, out: Path, indent: int = 2) -> None:
    """Serialize `obj` next to `out` and move it into place, so readers only ever see a complete file."""
    out.parent.mkdir(parents=True, exist_ok=True)
    tmp = out.with_suffix(out.suffix + ".tmp")
    tmp.write_text(json.dumps(obj, indent=indent), encoding="utf-8")
    os.replace(tmp, out)

def read_json(path: Path) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))
