from __future__ import annotations

from enum import Enum
from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator


class PresentationMode(str, Enum):
    SOLVED = "solved"
    EXERCISE = "exercise"


class PageConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    solved: str
    exercise: str | None = None
    description: str | None = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("page name must not be blank")
        return v

    @property
    def modes(self) -> list[PresentationMode]:
        modes = [PresentationMode.SOLVED]
        if self.exercise is not None:
            modes.append(PresentationMode.EXERCISE)
        return modes

    def source(self, mode: PresentationMode) -> Path:
        """Return the page file to run in the given presentation mode."""
        if mode == PresentationMode.EXERCISE:
            if self.exercise is None:
                raise ValueError(f"Page '{self.name}' has no exercise version")
            return Path(self.exercise)
        return Path(self.solved)


class PlaybookConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    title: str
    pages: list[PageConfig]

    @field_validator("pages")
    @classmethod
    def pages_must_be_unique_and_present(cls, v: list[PageConfig]) -> list[PageConfig]:
        if not v:
            raise ValueError("pages must not be empty")
        seen: set[str] = set()
        for page in v:
            if page.name in seen:
                raise ValueError(f"Duplicate page name '{page.name}'")
            seen.add(page.name)
        return v

    def page(self, name: str) -> PageConfig:
        for page in self.pages:
            if page.name == name:
                return page
        raise ValueError(f"Unknown page '{name}'")


def _resolve(config_dir: Path, value: str) -> str:
    try:
        expanded = expandvars(value, nounset=True)
    except Exception as e:
        # Variable is missing and has no default
        raise ValueError(f"Unresolved environment variable in '{value}': {e}") from e
    path = Path(expanded)
    if not path.is_absolute():
        path = config_dir / path
    return str(path.resolve())


def load_config(path: Path) -> PlaybookConfig:
    """Load and validate a playbook config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Config {path} must be a mapping")

    config = PlaybookConfig(**raw)

    # Resolve page paths relative to the config file location
    for page in config.pages:
        page.solved = _resolve(config_dir, page.solved)
        if page.exercise is not None:
            page.exercise = _resolve(config_dir, page.exercise)

    return config
