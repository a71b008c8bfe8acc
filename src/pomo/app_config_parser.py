"""Tolerant parser for `KEY=VALUE` config lines into `PomoConfig`."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable, Optional

from pomo.app_config_schema import CONFIG_FIELDS, ConfigField, PomoConfig
from pomo.colors import RGB, InvalidColorFormatError

_FIELDS_BY_KEY = {field.key: field for field in CONFIG_FIELDS}


def parse_config_lines(
    lines: Iterable[str],
    *,
    defaults: Optional[PomoConfig] = None,
    logger: Optional[logging.Logger] = None,
) -> PomoConfig:
    """Parse config lines; unknown keys and bad values keep their defaults."""
    logger = logger or logging.getLogger("pomo.config")
    values: dict[str, Any] = {}
    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line:
            continue
        key, separator, raw_value = line.partition("=")
        if not separator:
            logger.debug("Ignoring config line %d without '='", line_number)
            continue
        field = _FIELDS_BY_KEY.get(key.strip())
        if field is None:
            logger.debug("Ignoring unknown config key %r", key.strip())
            continue
        try:
            values[field.attribute] = _parse_value(field, raw_value.strip())
        except ValueError as error:
            logger.warning("Ignoring invalid %s value: %s", field.key, error)

    return replace(defaults or PomoConfig(), **values)


def format_config(config: PomoConfig) -> str:
    lines = [
        f"{field.key}={_format_value(field, getattr(config, field.attribute))}"
        for field in CONFIG_FIELDS
    ]
    return "\n".join(lines) + "\n"


def parse_minutes(value: str) -> int:
    """Parse a positive whole number of minutes."""
    try:
        minutes = int(str(value).strip(), 10)
    except ValueError as error:
        raise ValueError(f"minutes must be an integer, got: {value!r}") from error
    if minutes < 1:
        raise ValueError(f"minutes must be at least 1, got: {minutes}")
    return minutes


def _parse_value(field: ConfigField, value: str) -> Any:
    if field.kind == "color":
        try:
            return RGB.from_hex(value)
        except InvalidColorFormatError as error:
            raise ValueError(str(error)) from error
    if field.kind == "minutes":
        return parse_minutes(value)
    raise ValueError(f"unsupported field kind: {field.kind}")


def _format_value(field: ConfigField, value: Any) -> str:
    if field.kind == "color":
        return value.to_hex()
    return str(int(value))
