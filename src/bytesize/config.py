from __future__ import annotations

"""Configuration loading for the bytesize command line."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping
import os
import textwrap

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - Python <3.11 fallback
    import tomli as tomllib  # type: ignore

from .numfmt import NumericFormatSpec
from .parser import ParseOptions
from .units import Unit

__all__ = ["Config", "load_config", "write_default_config", "DEFAULT_CONFIG_TOML", "CONFIG_ENV_VAR"]

CONFIG_ENV_VAR = "BYTESIZE_CONFIG"

DEFAULT_CONFIG_TOML = textwrap.dedent(
    """
    [parse]
    case_sensitive = false
    prefer_binary_ambiguous = true

    [format]
    unit = "one"
    pattern = "#"
    suffix = true
    """
)


@dataclass(slots=True)
class Config:
    """Parse and format defaults for the bytesize command."""

    case_sensitive: bool = False
    prefer_binary_ambiguous: bool = True
    unit: str = "one"
    pattern: str = "#"
    suffix: bool = True

    def parse_options(self) -> ParseOptions:
        return ParseOptions(
            case_sensitive=self.case_sensitive,
            prefer_binary_ambiguous=self.prefer_binary_ambiguous,
        )

    def format_unit(self) -> Unit:
        return Unit.from_name(self.unit)

    def format_spec(self) -> NumericFormatSpec:
        return NumericFormatSpec(self.pattern)


def default_config_path() -> Path:
    return Path.home() / ".config" / "bytesize" / "config.toml"


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a candidate list of paths.

    Resolution order:
        1. explicit ``config_path`` argument
        2. ``BYTESIZE_CONFIG`` environment variable
        3. ``~/.config/bytesize/config.toml``
        4. packaged default configuration

    An explicit path that does not exist is an error; the other candidates
    are skipped when missing.
    """

    if config_path:
        explicit = Path(config_path).expanduser()
        if not explicit.is_file():
            raise FileNotFoundError(f"Config file not found: {explicit}")
        return _read_config_file(explicit)

    candidates: list[Path] = []
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidates.append(Path(env_path).expanduser())
    candidates.append(default_config_path())

    for candidate in candidates:
        if candidate.is_file():
            return _read_config_file(candidate)

    return _config_from_toml(DEFAULT_CONFIG_TOML)


def _read_config_file(path: Path) -> Config:
    try:
        return _config_from_toml(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {path}: {e}") from e


def _config_from_toml(content: str) -> Config:
    data = tomllib.loads(content)
    parse_section = data.get("parse", {})
    format_section = data.get("format", {})

    config = Config(
        case_sensitive=_bool(parse_section, "case_sensitive", False),
        prefer_binary_ambiguous=_bool(parse_section, "prefer_binary_ambiguous", True),
        unit=str(format_section.get("unit", "one")),
        pattern=str(format_section.get("pattern", "#")),
        suffix=_bool(format_section, "suffix", True),
    )
    # Fail early on a bad unit name or pattern
    config.format_unit()
    config.format_spec()
    return config


def _bool(section: Mapping[str, Any], key: str, fallback: bool) -> bool:
    value = section.get(key, fallback)
    if not isinstance(value, bool):
        raise ValueError(f"Config value {key!r} must be true or false, got {value!r}")
    return value


def write_default_config(target_path: str | Path, overwrite: bool = False) -> Path:
    """Write the packaged defaults to ``target_path`` and return its absolute path.

    An existing file is kept unless ``overwrite`` is set.
    """

    target = Path(target_path).expanduser()
    if target.exists() and not overwrite:
        raise FileExistsError(f"Config file already exists: {target}")
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(DEFAULT_CONFIG_TOML.lstrip(), encoding="utf-8")
    return target.resolve()
