"""Helpers for Java-style key=value property files."""

from __future__ import annotations

from pathlib import Path


def read_properties(path: Path | str) -> dict[str, str]:
    """Read simple key=value property files, ignoring comments and blank lines."""
    props: dict[str, str] = {}
    with Path(path).open("r", encoding="utf-8") as handle:
        for line in handle:
            stripped = line.strip()
            if not stripped or stripped[0] in "#!":
                continue
            key, separator, value = stripped.partition("=")
            if not separator:
                continue
            props[key.strip()] = value.strip()
    return props


def require_property(props: dict[str, str], key: str, source: Path | str) -> str:
    """Return a property value or fail with the file it was expected in."""
    if key not in props or not props[key]:
        raise ValueError(f"Missing property {key} in {source}")
    return props[key]


def parse_float_list(raw: str) -> list[float]:
    """Parse a comma-separated list of floats such as ``0,10000,15000``."""
    values: list[float] = []
    for token in raw.split(","):
        stripped = token.strip()
        if not stripped:
            continue
        try:
            values.append(float(stripped))
        except ValueError as exc:
            raise ValueError(f"Invalid numeric list entry: {stripped!r}") from exc
    if not values:
        raise ValueError("Numeric list cannot be empty.")
    return values
