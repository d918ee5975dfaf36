"""package.json reading and writing."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from monobump.errors import ConfigurationError
from monobump.workspace.package import Package


def read_manifest(path: Path) -> dict[str, Any]:
    """Read a JSON manifest.

    Raises:
        ConfigurationError: If the file is missing or not a JSON object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigurationError("Manifest not found", path=path) from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON: {e}", path=path) from e

    if not isinstance(data, dict):
        raise ConfigurationError("Manifest must be a JSON object", path=path)
    return data


def write_manifest(path: Path, data: dict[str, Any]) -> None:
    """Write a manifest with two-space indentation and a trailing newline."""
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def write_manifests(packages: Iterable[Package]) -> int:
    """Persist every package manifest.

    Returns:
        Number of manifests written.
    """
    count = 0
    for pkg in packages:
        write_manifest(pkg.manifest_path, pkg.manifest)
        count += 1
    return count
