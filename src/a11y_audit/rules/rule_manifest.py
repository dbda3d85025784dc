"""Utilities for loading and merging rule manifest files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping, Sequence

import yaml

from ..models import IssueSeverity, IssueType

logger = logging.getLogger(__name__)


class RuleManifestError(RuntimeError):
    """Raised when rule manifests cannot be loaded or parsed."""


@dataclass(slots=True)
class RuleSettings:
    """Per-detector configuration merged from rule manifests."""

    name: str
    enabled: bool = True
    severity: IssueSeverity | None = None
    type: IssueType | None = None


class RuleManifestManager:
    """Load rule manifests and expose the merged settings for the audit service."""

    def __init__(self, default_manifests: Sequence[Path | str] | None = None) -> None:
        self._default_manifests = [Path(path) for path in default_manifests or []]

    # ------------------------------------------------------------------
    def load(self, manifests: Sequence[Path | str] | None = None) -> List[RuleSettings]:
        """Return all rule settings defined by the provided manifests."""

        manifest_paths = list(self._default_manifests)
        if manifests:
            manifest_paths.extend(Path(path) for path in manifests)

        rules: MutableMapping[str, RuleSettings] = {}
        for manifest_path in manifest_paths:
            data = self._load_manifest(manifest_path)
            rule_configs = data.get("rules") or []
            if not isinstance(rule_configs, list):
                raise RuleManifestError(f"Rule manifest 'rules' must be a list: {manifest_path}")

            for rule_config in rule_configs:
                if not isinstance(rule_config, Mapping):
                    continue

                name = str(rule_config.get("name") or "").strip()
                if not name:
                    continue

                settings = rules.get(name, RuleSettings(name=name))
                if "enabled" in rule_config:
                    settings.enabled = bool(rule_config["enabled"])

                severity = _coerce_enum(IssueSeverity, rule_config.get("severity"))
                if severity is not None:
                    settings.severity = severity

                issue_type = _coerce_enum(IssueType, rule_config.get("type"))
                if issue_type is not None:
                    settings.type = issue_type

                rules[name] = settings

        return list(rules.values())

    # ------------------------------------------------------------------
    def settings_by_name(
        self, manifests: Sequence[Path | str] | None = None
    ) -> Dict[str, RuleSettings]:
        """Return merged settings keyed by detector name."""

        return {settings.name: settings for settings in self.load(manifests)}

    # ------------------------------------------------------------------
    def _load_manifest(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise RuleManifestError(f"Rule manifest not found: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem errors surfaced to caller
            raise RuleManifestError(f"Failed to read rule manifest {path}") from exc

        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as exc:
            raise RuleManifestError(f"Invalid YAML in rule manifest {path}") from exc

        if not isinstance(data, Mapping):
            raise RuleManifestError(f"Rule manifest must be a mapping: {path}")

        logger.debug("Loaded rule manifest %s", path)
        return dict(data)


def _coerce_enum(enum_type: Any, value: object) -> Any:
    if isinstance(value, enum_type):
        return value
    if not isinstance(value, str):
        return None
    try:
        return enum_type(value.strip().lower())
    except ValueError:
        return None
