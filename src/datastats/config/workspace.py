from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from datastats.utils.load import load_yaml

WORKSPACE_FILENAME = "datastats.yaml"
VALID_VISUAL_PROVIDERS = ("AUTO", "RICH", "OFF")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class InputDefaults(BaseModel):
    encoding: Optional[str] = None

    @field_validator("encoding", mode="before")
    @classmethod
    def _normalize(cls, value: object):
        if value is None:
            return None
        text = str(value).strip()
        return text or None


class OutputDefaults(BaseModel):
    precision: Optional[int] = Field(
        default=None, ge=0, le=17, description="DIGITS AFTER THE DECIMAL POINT"
    )


class WorkspaceConfig(BaseModel):
    log_level: Optional[str] = Field(default=None, description="DEFAULT LOG LEVEL")
    visuals: Optional[str] = Field(default=None, description="AUTO | RICH | OFF")
    input: InputDefaults = Field(default_factory=InputDefaults)
    output: OutputDefaults = Field(default_factory=OutputDefaults)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        if value is None:
            return None
        if isinstance(value, int):
            value = logging.getLevelName(value)
        name = str(value).strip().upper()
        if not name:
            return None
        if name not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {value!r}"
            )
        return name

    @field_validator("visuals", mode="before")
    @classmethod
    def _normalize_visuals(cls, value):
        if value is None:
            return None
        if isinstance(value, bool):
            # YAML reads a bare OFF as False
            return "OFF" if value is False else "AUTO"
        name = str(value).strip().upper()
        if not name:
            return None
        if name not in VALID_VISUAL_PROVIDERS:
            raise ValueError(
                f"visuals must be one of {', '.join(VALID_VISUAL_PROVIDERS)}, got {value!r}"
            )
        return name


@dataclass
class WorkspaceContext:
    file_path: Path
    config: WorkspaceConfig

    @property
    def root(self) -> Path:
        return self.file_path.parent


def load_workspace_context(start_dir: Optional[Path] = None) -> Optional[WorkspaceContext]:
    """Search from start_dir upward for datastats.yaml and return parsed config."""
    directory = (start_dir or Path.cwd()).resolve()
    for path in [directory, *directory.parents]:
        candidate = path / WORKSPACE_FILENAME
        if candidate.is_file():
            data = load_yaml(candidate)
            # Allow input/output set to null to fall back to defaults
            for key in ("input", "output"):
                if key in data and data[key] is None:
                    data.pop(key)
            cfg = WorkspaceConfig.model_validate(data)
            return WorkspaceContext(file_path=candidate, config=cfg)
    return None
