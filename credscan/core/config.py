"""
CredScan Configuration Management

Loads and manages configuration from .credscan.yaml files.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from credscan.core.errors import ConfigError
from credscan.core.records import DEFAULT_ENCODING, DEFAULT_ERRORS, ERROR_POLICIES

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".credscan.yaml"

OUTPUT_FORMATS = ("console", "json", "sarif", "html")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class OutputConfig:
    format: str = "console"
    file: Optional[str] = None


@dataclass
class DecodingConfig:
    encoding: str = DEFAULT_ENCODING
    errors: str = DEFAULT_ERRORS


@dataclass
class DisplayConfig:
    redact: bool = False


@dataclass
class CredScanConfig:
    """Root configuration object for CredScan."""

    output: OutputConfig = field(default_factory=OutputConfig)
    decoding: DecodingConfig = field(default_factory=DecodingConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log_level: str = "WARNING"

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "CredScanConfig":
        """Load configuration from a YAML file, falling back to defaults."""
        if config_path is None:
            # Search in current directory
            config_path = Path.cwd() / CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
            return cls()

        if not isinstance(raw, dict):
            logger.warning("Ignoring config %s: top level is not a mapping", config_path)
            return cls()

        return cls._from_dict(raw)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "CredScanConfig":
        """Build config from a parsed YAML dictionary."""
        output_data = _section(data, "output")
        output = OutputConfig(
            format=str(output_data.get("format", "console")).lower(),
            file=output_data.get("file"),
        )
        if output.file is not None and not isinstance(output.file, str):
            raise ConfigError(f"output.file must be a path, got {output.file!r}")
        if output.format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unknown output format '{output.format}' (expected one of {', '.join(OUTPUT_FORMATS)})"
            )

        decoding_data = _section(data, "decoding")
        decoding = DecodingConfig(
            encoding=decoding_data.get("encoding", DEFAULT_ENCODING),
            errors=str(decoding_data.get("errors", DEFAULT_ERRORS)).lower(),
        )
        if not isinstance(decoding.encoding, str):
            raise ConfigError(f"decoding.encoding must be a codec name, got {decoding.encoding!r}")
        if decoding.errors not in ERROR_POLICIES:
            raise ConfigError(
                f"Unknown decoding error policy '{decoding.errors}' (expected one of {', '.join(ERROR_POLICIES)})"
            )

        display_data = _section(data, "display")
        redact = display_data.get("redact", False)
        if not isinstance(redact, bool):
            raise ConfigError(f"display.redact must be true or false, got {redact!r}")
        display = DisplayConfig(redact=redact)

        logging_data = _section(data, "logging")
        log_level = str(logging_data.get("level", "WARNING")).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level '{log_level}'")

        return cls(output=output, decoding=decoding, display=display, log_level=log_level)


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a top-level mapping section; a missing or empty section is {}."""
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"Section '{name}' must be a mapping, got {type(section).__name__}")
    return section


def generate_default_config() -> str:
    """Generate a default .credscan.yaml configuration file content."""
    return """\
# CredScan Configuration

# Output settings
output:
  format: console  # console, json, sarif, html
  # file: credscan-report.json

# How file bytes are turned into text
decoding:
  encoding: utf-8
  errors: replace  # replace, strict, ignore

# Console display
display:
  redact: false  # mask passwords in credential matches

logging:
  level: WARNING  # DEBUG, INFO, WARNING, ERROR
"""
