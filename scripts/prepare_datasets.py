# Allow running the CLI without installing the package (PYTHONPATH shim)
try:
    import neurofinder_prep  # noqa: F401
except ModuleNotFoundError:  # pragma: no cover
    import pathlib as _pathlib, sys as _sys
    _sys.path.insert(0, str(_pathlib.Path(__file__).resolve().parents[1] / "src"))

from neurofinder_prep.cli import cli

if __name__ == "__main__":
    cli()
