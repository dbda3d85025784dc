"""Rule manifest utilities."""

from .rule_manifest import RuleManifestError, RuleManifestManager, RuleSettings

__all__ = [
    "RuleManifestError",
    "RuleManifestManager",
    "RuleSettings",
]
