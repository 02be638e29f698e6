"""Route Dependencies — settings-derived values injected into handlers.

Design Decisions:
    - Plain functions usable with Depends(): tests override them via app.dependency_overrides
"""

from pledgewall.config import Settings, get_settings
from pledgewall.core.taxonomy import Taxonomy, get_taxonomy


def get_app_settings() -> Settings:
    return get_settings()


def get_active_taxonomy() -> Taxonomy:
    return get_taxonomy(get_settings().taxonomy_version)
