from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from lnxconfig.core.errors import SettingsError
from lnxconfig.core.model import TimingParameters
from lnxconfig.parser.fields import UINT64_MAX
from lnxconfig.utils.yaml import load_yaml

_TOP_LEVEL_KEYS = {"max_directive_length", "max_name_length", "reject_unknown_directives", "defaults"}
_DEFAULT_KEYS = {f.name for f in fields(TimingParameters)}


@dataclass(slots=True)
class ParserSettings:
    max_directive_length: int = 10
    max_name_length: int = 32
    reject_unknown_directives: bool = False
    defaults: TimingParameters = field(default_factory=TimingParameters)


def _positive_int(data: dict[str, Any], key: str, fallback: int) -> int:
    value = data.get(key, fallback)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise SettingsError(f"{key} must be a positive integer, got {value!r}")
    return value


def _timing_defaults(data: Any) -> TimingParameters:
    if data is None:
        return TimingParameters()
    if not isinstance(data, dict):
        raise SettingsError("defaults must be a mapping")
    unknown = sorted(set(data) - _DEFAULT_KEYS)
    if unknown:
        raise SettingsError(f"Unknown defaults keys: {', '.join(unknown)}")
    values: dict[str, int] = {}
    for key, value in data.items():
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= UINT64_MAX:
            raise SettingsError(f"defaults.{key} must be an unsigned 64-bit integer, got {value!r}")
        values[key] = value
    return TimingParameters(**values)


def settings_from_dict(data: dict[str, Any]) -> ParserSettings:
    unknown = sorted(set(data) - _TOP_LEVEL_KEYS)
    if unknown:
        raise SettingsError(f"Unknown settings keys: {', '.join(unknown)}")
    strict = data.get("reject_unknown_directives", False)
    if not isinstance(strict, bool):
        raise SettingsError("reject_unknown_directives must be true or false")
    return ParserSettings(
        max_directive_length=_positive_int(data, "max_directive_length", 10),
        max_name_length=_positive_int(data, "max_name_length", 32),
        reject_unknown_directives=strict,
        defaults=_timing_defaults(data.get("defaults")),
    )


def load_settings(path: Path | None) -> ParserSettings:
    if path is None:
        return ParserSettings()
    try:
        data = load_yaml(path)
    except (OSError, ValueError) as exc:
        raise SettingsError(f"Cannot load settings from {path}: {exc}") from exc
    return settings_from_dict(data)
