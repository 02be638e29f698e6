"""Taxonomy — versioned, closed label sets for profile types and commitment themes.

Invariants:
    - A Taxonomy is immutable once registered
    - Aliases always resolve to a canonical profile type of the same version
    - get_taxonomy() raises KeyError for an unknown version (fail at startup, not per request)

Design Decisions:
    - One registry keyed by version instead of per-deployment literals: older variants
      spelled "Workshops", newer ones "Workshop Participant"; both now resolve to one label
    - Suggested actions live beside their theme so the form and the API agree
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from pledgewall.core.domain_types import CommitmentTheme, ProfileType


@dataclass(frozen=True)
class Taxonomy:
    """Closed label sets accepted by the validator."""
    version: str
    profile_types: tuple[str, ...]
    commitment_themes: tuple[str, ...]
    profile_type_aliases: Mapping[str, str] = field(default_factory=dict)
    suggested_actions: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def resolve_profile_type(self, label: str) -> str | None:
        """Return the canonical label for `label`, or None when unknown."""
        if label in self.profile_types:
            return label
        return self.profile_type_aliases.get(label)

    def is_commitment_theme(self, tag: object) -> bool:
        return isinstance(tag, str) and tag in self.commitment_themes

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "profileTypes": list(self.profile_types),
            "profileTypeAliases": dict(self.profile_type_aliases),
            "commitmentThemes": [
                {
                    "theme": theme,
                    "actions": list(self.suggested_actions.get(theme, ())),
                }
                for theme in self.commitment_themes
            ],
        }


TAXONOMY_V1 = Taxonomy(
    version="v1",
    profile_types=tuple(p.value for p in ProfileType),
    commitment_themes=tuple(c.value for c in CommitmentTheme),
    profile_type_aliases=MappingProxyType({
        "Workshops": ProfileType.WORKSHOP_PARTICIPANT.value,
    }),
    suggested_actions=MappingProxyType({
        CommitmentTheme.ENERGY.value: (
            "Turn off lights when not in use",
            "Use energy-efficient appliances",
            "Set thermostat 1°C higher in summer",
        ),
        CommitmentTheme.TRANSPORTATION.value: (
            "Walk or bike for short trips",
            "Use public transport at least once a week",
            "Carpool when possible",
        ),
        CommitmentTheme.CONSUMPTION.value: (
            "Reduce single-use plastics",
            "Buy local and seasonal produce",
            "Repair instead of replace when possible",
        ),
    }),
)

_REGISTRY: dict[str, Taxonomy] = {TAXONOMY_V1.version: TAXONOMY_V1}


def get_taxonomy(version: str) -> Taxonomy:
    """Look up a registered taxonomy by version."""
    try:
        return _REGISTRY[version]
    except KeyError:
        raise KeyError(
            f"Unknown taxonomy version {version!r}; "
            f"known: {', '.join(sorted(_REGISTRY))}",
        ) from None
