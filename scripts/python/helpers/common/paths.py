"""Path helpers for script inputs and outputs."""

from __future__ import annotations

from pathlib import Path


def require_input_files(*paths: Path | str | None) -> None:
    """Exit with a message listing any input files that do not exist."""
    missing = [str(path) for path in paths if path is not None and not Path(path).exists()]
    if missing:
        raise SystemExit("Missing input file(s): " + ", ".join(missing))


def ensure_output_dir(output_dir: str | None) -> Path:
    """Return the output directory, defaulting to the working directory."""
    target = Path(output_dir) if output_dir else Path.cwd()
    target.mkdir(parents=True, exist_ok=True)
    return target


def resolve_output_path(file_name: str, output_dir: str | None = None) -> Path:
    return ensure_output_dir(output_dir) / file_name
