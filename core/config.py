import json
from dataclasses import dataclass
from pathlib import Path

import constants
from core.exceptions import ConfigError


@dataclass(frozen=True)
class Settings:
    """
    User settings for the CLI.

    Attributes:
        manifest: Default analysis manifest used when --manifest is omitted.
        color: Whether report lines are coloured.
        debug: Whether debug lines are printed.
    """

    manifest: Path | None = None
    color: bool = True
    debug: bool = False


def get_config_file(config_file: Path | None = None) -> dict:
    config_file = config_file or constants.CONFIG_FILE
    if not config_file.exists():
        return {}
    try:
        data = json.loads(config_file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(
            f"Could not read settings from {config_file}",
            file_path=str(config_file),
            original_exception=e,
        ) from e
    if not isinstance(data, dict):
        raise ConfigError(
            "Settings file must contain a JSON object", file_path=str(config_file)
        )
    return data


def load_settings(config_file: Path | None = None) -> Settings:
    config = get_config_file(config_file)
    manifest = config.get("manifest")
    return Settings(
        manifest=Path(manifest).expanduser() if manifest else None,
        color=bool(config.get("color", True)),
        debug=bool(config.get("debug", False)),
    )
