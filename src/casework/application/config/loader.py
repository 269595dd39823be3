"""Reading project configuration files.

Every way a configuration can fail to load (missing file, unreadable file,
broken JSON, schema violation) surfaces as a single ``ConfigError`` whose
``error_type`` lets the CLI and the web layer pick their own presentation.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from casework.application.config.schema import ProjectConfiguration


class ConfigError(Exception):
    """A configuration could not be turned into a ProjectConfiguration.

    ``details`` holds one dict per problem: ``line``/``column``/``message``
    for JSON syntax errors, ``path``/``message``/``value``/``error_type``
    for schema violations.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _dotted(loc: tuple[str | int, ...]) -> str:
    """``("output", "formats", 1)`` -> ``"output.formats[1]"``."""
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path


def _schema_problems(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _dotted(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _summary(problems: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for problem in problems:
        line = f"  - {problem['path']}: {problem['message']}"
        value = problem["value"]
        if value is not None and not isinstance(value, dict):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> ProjectConfiguration:
    try:
        return ProjectConfiguration.model_validate(data)
    except PydanticValidationError as e:
        problems = _schema_problems(e)
        raise ConfigError(_summary(problems), "validation", path, problems) from e


def _read(path: Path) -> str:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path)
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            f"Permission denied reading config file: {path}", "permission_denied", path
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading config file: {path}: {e}", "file_read_error", path
        ) from e


def load_config(path: Path) -> ProjectConfiguration:
    """Read and validate a JSON configuration file.

    Raises:
        ConfigError: with ``error_type`` "file_not_found", "permission_denied",
            "file_read_error", "json_parse" or "validation".
    """
    path = Path(path)
    content = _read(path)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> ProjectConfiguration:
    """Validate an already-parsed configuration (e.g. a request body)."""
    return _validate(data)
