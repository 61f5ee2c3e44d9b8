"""Extraction profiles.

A profile bundles the knobs of one extraction pass: how animations are
resampled and in which order material color sources are consulted.
Profiles are registered in a global dict and selected by id when loading:

    load_from_path(path, parser, profile="film")

Adding a profile:
    1. Build an ExtractProfile with the desired sub-configs
    2. Call register_profile() to add it to the registry
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .errors import UnknownProfileError
from .native.native_parser import DEFAULT_RESAMPLE_RATE


# Material source block names, matching the attributes on a native material.
SOURCE_PBR = "pbr"
SOURCE_LEGACY = "fbx"


# ---------------------------------------------------------------------------
# Configuration dataclasses
# ---------------------------------------------------------------------------

@dataclass
class BakeConfig:
    """Configuration for animation baking."""

    # Samples per unit of native time.
    sample_rate: float = DEFAULT_RESAMPLE_RATE

    def __post_init__(self):
        if not self.sample_rate > 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate!r}")


@dataclass
class MaterialConfig:
    """Configuration for material color resolution."""

    # Source blocks consulted for every color, highest priority first.
    color_chain: Tuple[str, ...] = (SOURCE_PBR, SOURCE_LEGACY)

    def __post_init__(self):
        unknown = [s for s in self.color_chain if s not in (SOURCE_PBR, SOURCE_LEGACY)]
        if unknown:
            raise ValueError(f"Unknown material source(s): {unknown}")


@dataclass
class ExtractProfile:
    """Complete configuration for one extraction pass."""

    profile_id: str = "default"
    profile_name: str = "Default"

    # False skips the animation baker entirely (animations come out empty).
    bake_animations: bool = True

    bake: BakeConfig = field(default_factory=BakeConfig)
    material: MaterialConfig = field(default_factory=MaterialConfig)

    notes: str = ""


# ---------------------------------------------------------------------------
# Profile registry
# ---------------------------------------------------------------------------

EXTRACT_PROFILES: Dict[str, ExtractProfile] = {}

DEFAULT_PROFILE_ID = "default"


def register_profile(profile: ExtractProfile) -> None:
    """Register an extraction profile in the global registry."""
    EXTRACT_PROFILES[profile.profile_id] = profile


def get_profile(profile_id: str) -> Optional[ExtractProfile]:
    """Look up a profile by its profile_id string."""
    return EXTRACT_PROFILES.get(profile_id)


def get_profile_items() -> List[Tuple[str, str, str]]:
    """Return (identifier, name, description) tuples for every registered profile."""
    return [
        (pid, prof.profile_name, prof.notes)
        for pid, prof in EXTRACT_PROFILES.items()
    ]


def resolve_profile(profile=None) -> ExtractProfile:
    """Accept None, a profile id or an ExtractProfile and return a profile."""
    if profile is None:
        return EXTRACT_PROFILES[DEFAULT_PROFILE_ID]
    if isinstance(profile, ExtractProfile):
        return profile
    found = get_profile(profile)
    if found is None:
        raise UnknownProfileError(f"Unknown extraction profile: {profile!r}")
    return found


# ---------------------------------------------------------------------------
# Built-in profiles
# ---------------------------------------------------------------------------

register_profile(ExtractProfile(
    profile_id="default",
    profile_name="Default",
    notes="30 samples per unit, PBR colors with legacy fallback",
))

register_profile(ExtractProfile(
    profile_id="film",
    profile_name="Film (24)",
    bake=BakeConfig(sample_rate=24.0),
    notes="24 samples per unit",
))

register_profile(ExtractProfile(
    profile_id="realtime_60",
    profile_name="Realtime (60)",
    bake=BakeConfig(sample_rate=60.0),
    notes="60 samples per unit",
))

register_profile(ExtractProfile(
    profile_id="legacy_first",
    profile_name="Legacy Materials First",
    material=MaterialConfig(color_chain=(SOURCE_LEGACY, SOURCE_PBR)),
    notes="Prefer Lambert/Phong colors over PBR colors",
))
