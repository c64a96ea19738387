"""Hierarchy loader for YAML and JSON definition files."""

import json
from pathlib import Path
from typing import Dict, Optional, Union

import structlog
import yaml
from pydantic import ValidationError

from spha.core.config import settings
from spha.core.exceptions import ConfigurationError, HierarchyLoadError
from spha.domain.models.default_hierarchy import default_hierarchy
from spha.domain.models.hierarchy import KpiHierarchy, KpiNode

log = structlog.get_logger(__name__)

# Module-level cache (definition files don't change at runtime)
_cache: Dict[Path, KpiHierarchy] = {}

YAML_SUFFIXES = {".yaml", ".yml"}


def load_hierarchy(path: Optional[Union[str, Path]] = None) -> KpiHierarchy:
    """Load a hierarchy definition. Cached per path after first load.

    Args:
        path: YAML or JSON file (default: settings.hierarchy_path, then the
            built-in default hierarchy)

    Returns:
        Validated KpiHierarchy

    Raises:
        ConfigurationError: settings.hierarchy_path names a file that does not exist
        HierarchyLoadError: File missing, unparsable, or not a valid hierarchy
    """
    if path is None:
        if settings.hierarchy_path is None:
            return default_hierarchy()
        if not settings.hierarchy_path.is_file():
            raise ConfigurationError(
                f"HIERARCHY_PATH does not point to a file: {settings.hierarchy_path}"
            )
        path = settings.hierarchy_path

    path = Path(path).resolve()
    if path in _cache:
        return _cache[path]

    if not path.exists():
        raise HierarchyLoadError(f"Hierarchy file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise HierarchyLoadError(f"Could not parse hierarchy file {path}: {e}") from e

    hierarchy = parse_hierarchy(data, source=str(path))
    _cache[path] = hierarchy
    log.info(
        "hierarchy_loaded",
        path=str(path),
        root_type_id=hierarchy.root.type_id,
        schema_version=hierarchy.schema_version,
    )
    return hierarchy


def parse_hierarchy(data: object, source: str = "<data>") -> KpiHierarchy:
    """Build a KpiHierarchy from decoded file content.

    Accepts a full document (``root`` + ``schemaVersion``) or a bare root node.
    """
    if not isinstance(data, dict):
        raise HierarchyLoadError(f"Hierarchy in {source} must be a mapping")

    try:
        if "root" in data:
            return KpiHierarchy.model_validate(data)
        return KpiHierarchy.create(KpiNode.model_validate(data))
    except ValidationError as e:
        raise HierarchyLoadError(f"Invalid hierarchy in {source}: {e}") from e


def clear_cache() -> None:
    """Forget all loaded hierarchy files."""
    _cache.clear()
