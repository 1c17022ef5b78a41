"""
Error registry management for loading and accessing error definitions.

This module loads error_registry.yaml, shipped next to it, and provides
lookups by error code.
"""

import yaml
from pathlib import Path
from typing import Dict, Optional

from educms_types.errors import ErrorDefinition


_error_registry: Optional[Dict[str, ErrorDefinition]] = None

REGISTRY_PATH = Path(__file__).parent / "error_registry.yaml"


def load_error_registry(registry_path: Optional[Path] = None) -> Dict[str, ErrorDefinition]:
    """
    Load error registry from YAML file.

    Returns:
        Dictionary mapping error codes to ErrorDefinition objects

    Raises:
        FileNotFoundError: If the registry file is missing
        ValueError: If YAML is malformed or validation fails
    """
    global _error_registry

    if _error_registry is not None and registry_path is None:
        return _error_registry

    path = registry_path or REGISTRY_PATH
    if not path.exists():
        raise FileNotFoundError(f"Error registry not found at {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data or "errors" not in data:
        raise ValueError("Invalid error registry format: missing 'errors' key")

    registry = {}
    for error_dict in data["errors"]:
        try:
            error_def = ErrorDefinition(**error_dict)
        except Exception as e:
            raise ValueError(
                f"Failed to parse error definition for {error_dict.get('code', 'unknown')}: {e}"
            ) from e
        if error_def.code in registry:
            raise ValueError(f"Duplicate error code: {error_def.code}")
        registry[error_def.code] = error_def

    if registry_path is None:
        _error_registry = registry
    return registry


def get_error_definition(error_code: str) -> ErrorDefinition:
    """
    Get error definition by code.

    Unknown codes resolve to a generic internal error definition.
    """
    registry = load_error_registry()

    if error_code not in registry:
        return ErrorDefinition(
            code="UNKNOWN",
            http_status=500,
            category="internal",
            severity="error",
            title="Unknown Error",
            message=f"An error occurred (code: {error_code})",
        )

    return registry[error_code]


def get_all_error_codes() -> list[str]:
    return sorted(load_error_registry().keys())
