"""Helpers for CLI commands.

Separated to keep `apisig.cli.main` focused on CLI wiring and user interaction.
"""

from __future__ import annotations

from pathlib import Path

_COMMENT_PREFIXES = ("#", "//")


def load_signatures(path: Path) -> list[str]:
    """Read one signature per line, skipping blank lines and comments."""
    signatures: list[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(_COMMENT_PREFIXES):
            continue
        signatures.append(stripped)
    return signatures


def build_context(source_path: Path | None):
    """Build a resolution context from Java sources, or core types only."""
    from apisig.resolution.catalog import CatalogContext, TypeCatalog

    if source_path is None:
        return CatalogContext(TypeCatalog.with_core_types())

    from apisig.resolution.java import JavaSourceScanner

    return CatalogContext(JavaSourceScanner().scan_directory(source_path))
