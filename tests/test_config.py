from __future__ import annotations

from pathlib import Path

import pytest

from text_toolkit.config import (
    ProfileNotFoundError,
    ProjectPaths,
    TruncateOptions,
    list_available_profiles,
    load_profile,
)


def test_bundled_profiles_available() -> None:
    profiles = list_available_profiles()
    assert "default" in profiles
    assert "compact" in profiles


def test_default_profile_matches_library_defaults() -> None:
    profile = load_profile("default")
    assert profile.id == "default"
    assert profile.slugify.separator == "-"
    assert profile.case.preserve_numbers is True
    assert profile.truncate.suffix == "..."
    assert profile.random.length == 10


def test_unknown_profile_raises() -> None:
    with pytest.raises(ProfileNotFoundError):
        load_profile("does-not-exist")


def test_invalid_profile_is_reported_as_value_error(tmp_path: Path) -> None:
    (tmp_path / "broken.yaml").write_text("id: broken\ntruncate:\n  length: -5\n", encoding="utf-8")
    paths = ProjectPaths(package_root=tmp_path, profiles_dir=tmp_path)
    with pytest.raises(ValueError):
        load_profile("broken", paths=paths)


def test_partial_profile_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "minimal.yaml").write_text("id: minimal\n", encoding="utf-8")
    paths = ProjectPaths(package_root=tmp_path, profiles_dir=tmp_path)
    profile = load_profile("minimal", paths=paths)
    assert profile.slugify.lowercase is True
    assert profile.truncate.length == 80
    assert list_available_profiles(paths) == ["minimal"]


def test_truncate_options_require_non_negative_length() -> None:
    assert TruncateOptions(length=0).length == 0
    with pytest.raises(ValueError):
        TruncateOptions(length=-1)
