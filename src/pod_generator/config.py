from __future__ import annotations

from enum import StrEnum
from typing import TypeVar

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from pod_generator.domain.pod import PodSizeMode
from pod_generator.domain.settings import GenerationSettings
from pod_generator.domain.tier import TierMode, Tolerance


class SettingsError(Exception):
    """Raised when a configured value is not recognized."""


_DEFAULTS: dict[str, object] = {
    "pods": {
        "tolerance": Tolerance.EXACT.value,
        "mode": PodSizeMode.BALANCED.value,
        "tier_mode": TierMode.NUMERIC.value,
    },
}


def create_config(
    yaml_path: str = "podgen.yaml",
    env_prefix: str = "PODGEN",
    defaults: dict[str, object] | None = None,
    *,
    tolerance: str | None = None,
    mode: str | None = None,
    tier_mode: str | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file.
        env_prefix: Prefix for environment variables.
        defaults: Default configuration values.
        tolerance: Override ``pods.tolerance``.
        mode: Override ``pods.mode``.
        tier_mode: Override ``pods.tier_mode``.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]

    overrides = _build_overrides(tolerance, mode, tier_mode)
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def _build_overrides(tolerance: str | None, mode: str | None, tier_mode: str | None) -> dict[str, object]:
    pods: dict[str, object] = {}
    if tolerance is not None:
        pods["tolerance"] = tolerance
    if mode is not None:
        pods["mode"] = mode
    if tier_mode is not None:
        pods["tier_mode"] = tier_mode
    return {"pods": pods} if pods else {}


_E = TypeVar("_E", bound=StrEnum)


def _parse_enum(enum_type: type[_E], raw: object, key: str) -> _E:
    value = str(raw).strip().lower().replace("-", "_")
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        raise SettingsError(f"Invalid {key} '{raw}'; expected one of: {allowed}") from None


def load_generation_settings(cfg: ConfigurationSet | None = None) -> GenerationSettings:
    if cfg is None:
        cfg = create_config()
    return GenerationSettings(
        tolerance=_parse_enum(Tolerance, cfg["pods.tolerance"], "pods.tolerance"),
        mode=_parse_enum(PodSizeMode, cfg["pods.mode"], "pods.mode"),
        tier_mode=_parse_enum(TierMode, cfg["pods.tier_mode"], "pods.tier_mode"),
    )
