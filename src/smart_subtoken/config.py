from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

from .languages import DEFAULT_LANGUAGES


@dataclass(slots=True)
class DepthPolicySettings:
    """Configuration block for the length-to-depth policy."""

    name: str = "interpolated"
    max_length: int = 10
    max_depth: int = 10
    min_length: int = 18
    min_depth: int = 2


@dataclass(slots=True)
class SmartTokenConfig:
    """Configuration options for the subtoken tokenizer."""

    # Registration order defines the language index of each script.
    languages: List[str] = field(default_factory=lambda: list(DEFAULT_LANGUAGES))
    metadata: str = "language"
    depth_policy: DepthPolicySettings = field(default_factory=DepthPolicySettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(SmartTokenConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "languages" in kwargs:
        languages = kwargs["languages"]
        if isinstance(languages, str) or not isinstance(languages, (list, tuple)):
            raise ValueError("'languages' must be a list of Unicode script names.")
        kwargs["languages"] = [str(language) for language in languages]
    if "depth_policy" in data:
        policy_value = data["depth_policy"]
        if isinstance(policy_value, DepthPolicySettings):
            kwargs["depth_policy"] = policy_value
        elif isinstance(policy_value, Mapping):
            kwargs["depth_policy"] = _build_policy_settings(policy_value)
        else:
            raise ValueError("'depth_policy' must be a mapping.")
    return kwargs


def _build_policy_settings(data: Mapping[str, Any]) -> DepthPolicySettings:
    policy_allowed = {field.name for field in fields(DepthPolicySettings)}
    filtered = {key: data[key] for key in data if key in policy_allowed}
    return DepthPolicySettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> SmartTokenConfig:
    """Build a SmartTokenConfig from a dictionary-like input."""
    if data is None:
        return SmartTokenConfig()
    return SmartTokenConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> SmartTokenConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> SmartTokenConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return SmartTokenConfig()
    return config_from_yaml(path)
