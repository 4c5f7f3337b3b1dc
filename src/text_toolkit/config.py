from __future__ import annotations

"""Option models and YAML profile loading."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .generators import ALPHANUMERIC

logger = logging.getLogger(__name__)


class CaseOptions(BaseModel):
    """Options shared by the case converters."""

    preserve_numbers: bool = True
    separator: str = "-"


class TruncateOptions(BaseModel):
    length: int = Field(ge=0)
    suffix: str = "..."
    preserve_words: bool = False


class SlugifyOptions(BaseModel):
    lowercase: bool = True
    separator: str = "-"
    remove_diacritics: bool = True


class RandomStringOptions(BaseModel):
    length: int = Field(default=10, ge=0)
    charset: str = Field(default=ALPHANUMERIC, min_length=1)


class ProfileModel(BaseModel):
    """A named bundle of option blocks loaded from a profile file."""

    id: str
    description: Optional[str] = None
    case: CaseOptions = Field(default_factory=CaseOptions)
    truncate: TruncateOptions = Field(default_factory=lambda: TruncateOptions(length=80))
    slugify: SlugifyOptions = Field(default_factory=SlugifyOptions)
    random: RandomStringOptions = Field(default_factory=RandomStringOptions)


@dataclass(frozen=True)
class ProjectPaths:
    """Locations of bundled data files."""

    package_root: Path
    profiles_dir: Path


def _default_paths() -> ProjectPaths:
    root = Path(__file__).resolve().parent
    return ProjectPaths(package_root=root, profiles_dir=root / "profiles")


PATHS = _default_paths()


class ProfileNotFoundError(FileNotFoundError):
    """Raised when a profile identifier cannot be located."""


def load_profile(profile_id: str, *, paths: ProjectPaths = PATHS) -> ProfileModel:
    """Load a profile by identifier from the profiles directory."""

    profile_path = paths.profiles_dir / f"{profile_id}.yaml"
    if not profile_path.exists():
        raise ProfileNotFoundError(f"Unknown profile '{profile_id}' at {profile_path}")
    logger.debug("Loading profile %s from %s", profile_id, profile_path)
    with profile_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    try:
        return ProfileModel.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid profile data in {profile_path}: {exc}") from exc


def list_available_profiles(paths: ProjectPaths = PATHS) -> List[str]:
    """Return the set of known profile identifiers."""

    return sorted(p.stem for p in paths.profiles_dir.glob("*.yaml"))
