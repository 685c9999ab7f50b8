"""Configuration model and loaders for rawtext.

Responsibilities:
- Define normalization settings as a typed dataclass.
- Parse trim flags identically from CLI, environment and YAML values.
- Resolve each flag with CLI > environment > YAML file > default precedence.

Key types:
- `NormalizerConfig`: trim flags and free-form labels for one run.
- `RuntimeConfigSources`: raw CLI and environment values for precedence resolution.
- `ConfigLoader`: YAML and environment construction helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml


_ENV_KEYS = {
    "trim_prefix": "RAWTEXT_TRIM_PREFIX",
    "trim_suffix": "RAWTEXT_TRIM_SUFFIX",
}
_TRIM_FLAG_TOKENS = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}
_TRIM_FLAG_CHOICES = "`true`/`false`, `1`/`0`, `yes`/`no`, `on`/`off`"


def _stripped(value: object) -> str | None:
    """Return `value` as stripped text, or `None` when missing or blank."""

    if value is None:
        return None
    return str(value).strip() or None


def parse_trim_flag(value: object, source: str) -> bool:
    """Parse one trim flag value.

    YAML may already deliver a `bool`; every other value is matched
    case-insensitively against the accepted tokens.

    Args:
        value: Raw flag value from a CLI option, environment variable or YAML field.
        source: Human-readable origin used in the error message.

    Raises:
        ValueError: If the value is blank or not an accepted token.
    """

    if isinstance(value, bool):
        return value
    token = _stripped(value)
    if token is not None and token.lower() in _TRIM_FLAG_TOKENS:
        return _TRIM_FLAG_TOKENS[token.lower()]
    raise ValueError(f"{source} must be a trim flag ({_TRIM_FLAG_CHOICES}), got `{value}`.")


@dataclass(frozen=True, slots=True)
class RuntimeConfigSources:
    """Raw values that override file-based trim flags.

    Attributes:
        cli: Flag values keyed by config field name (`trim_prefix`, `trim_suffix`).
        env: Environment variables keyed by `RAWTEXT_*` name.
    """

    cli: Mapping[str, str] = field(default_factory=dict)
    env: Mapping[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class NormalizerConfig:
    """Settings for one normalization run.

    Attributes:
        trim_prefix: Drop a leading whitespace run that contains a line break.
        trim_suffix: Drop a trailing whitespace run that contains a line break.
        extra: Additional string labels, reported but not interpreted.
    """

    trim_prefix: bool = False
    trim_suffix: bool = False
    extra: dict[str, str] = field(default_factory=dict)

    def resolved(self, sources: RuntimeConfigSources | None = None) -> NormalizerConfig:
        """Return a copy with trim flags resolved from `sources`.

        Precedence for each flag is `cli` > `env` > current field value.
        """

        resolved_sources = sources if sources is not None else RuntimeConfigSources()
        return NormalizerConfig(
            trim_prefix=self._resolve_flag("trim_prefix", self.trim_prefix, resolved_sources),
            trim_suffix=self._resolve_flag("trim_suffix", self.trim_suffix, resolved_sources),
            extra=dict(self.extra),
        )

    def as_lines(self) -> list[str]:
        """Return deterministic `key=value` lines describing this config."""

        lines = [
            f"trim_prefix={'true' if self.trim_prefix else 'false'}",
            f"trim_suffix={'true' if self.trim_suffix else 'false'}",
        ]
        lines.extend(f"extra.{key}={self.extra[key]}" for key in sorted(self.extra))
        return lines

    @staticmethod
    def _resolve_flag(key: str, current: bool, sources: RuntimeConfigSources) -> bool:
        """Resolve one trim flag; blank CLI/env values count as unset."""

        cli_value = _stripped(sources.cli.get(key))
        if cli_value is not None:
            return parse_trim_flag(cli_value, f"Option `--{key.replace('_', '-')}`")

        env_key = _ENV_KEYS[key]
        env_value = _stripped(sources.env.get(env_key))
        if env_value is not None:
            return parse_trim_flag(env_value, f"Environment variable `{env_key}`")

        return current


class ConfigLoader:
    """Factory methods for creating configs and sources from external inputs."""

    _SUPPORTED_YAML_KEYS = frozenset({"trim_prefix", "trim_suffix", "extra"})

    @staticmethod
    def from_yaml(path: Path) -> NormalizerConfig:
        """Create a config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def runtime_env(env: Mapping[str, str] | None = None) -> dict[str, str]:
        """Return the non-blank `RAWTEXT_*` variables from an environment mapping."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        return {
            key: env_map[key]
            for key in _ENV_KEYS.values()
            if _stripped(env_map.get(key)) is not None
        }

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> NormalizerConfig:
        """Build a config from a parsed YAML mapping."""

        unknown = sorted(
            str(key) for key in payload if key not in ConfigLoader._SUPPORTED_YAML_KEYS
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        flags = {
            key: parse_trim_flag(payload[key], f"{source_label} field `{key}`")
            for key in _ENV_KEYS
            if key in payload
        }
        return NormalizerConfig(
            **flags,
            extra=ConfigLoader._optional_string_map(payload, "extra", source_label),
        )

    @staticmethod
    def _optional_string_map(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> dict[str, str]:
        """Read an optional mapping with non-empty string keys and values."""

        raw = payload.get(key)
        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `{key}` must be a mapping/object.")

        labels: dict[str, str] = {}
        for raw_key, raw_value in raw.items():
            label = _stripped(raw_key)
            value = _stripped(raw_value)
            if label is None:
                raise ValueError(f"{source_label} field `{key}` contains a blank key.")
            if value is None:
                raise ValueError(
                    f"{source_label} field `{key}` contains blank value for `{label}`."
                )
            labels[label] = value
        return labels
