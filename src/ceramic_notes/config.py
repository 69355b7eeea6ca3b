"""Configuration constants and the generated app config for ceramic-notes."""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ceramic_notes.errors import ConfigError

# Ceramic node HTTP endpoint.
CERAMIC_URL: str = os.environ.get("CERAMIC_URL", "http://localhost:7007")

# Seed location (hex-encoded, 32 bytes). First file found is used.
SEED_ENV_VAR = "CERAMIC_NOTES_SEED"
SEED_FILES: list[Path] = [
    Path("~/.config/ceramic-notes/seed.txt").expanduser(),
    Path("~/.config/secret/ceramic-notes-seed.txt").expanduser(),
]

# Generated by `ceramic-notes bootstrap`. First file found is used.
CONFIG_ENV_VAR = "CERAMIC_NOTES_CONFIG"
CONFIG_FILES: list[Path] = [
    Path("config.json"),
    Path("~/.config/ceramic-notes/config.json").expanduser(),
]

# Alias of the notes index in the identity's directory.
NOTES_ALIAS = "notes"

# Schema of IDX definitions, when the node has one published.
IDX_DEFINITION_SCHEMA: str | None = os.environ.get("IDX_DEFINITION_SCHEMA") or None

SEED_LENGTH = 32


@dataclass(frozen=True)
class AppConfig:
    """Identifiers produced by bootstrap: definition aliases and schema commit URLs."""

    definitions: dict[str, str] = field(default_factory=dict)
    schemas: dict[str, str] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        return {"definitions": dict(self.definitions), "schemas": dict(self.schemas)}

    @classmethod
    def from_json(cls, data: Any) -> "AppConfig":
        if not isinstance(data, dict):
            msg = f"Config must be a JSON object, got {type(data).__name__}"
            raise ConfigError(msg)
        definitions = data.get("definitions")
        schemas = data.get("schemas")
        if not isinstance(definitions, dict) or not isinstance(schemas, dict):
            msg = f"Config needs 'definitions' and 'schemas' objects, got keys {sorted(data)!r}"
            raise ConfigError(msg)
        return cls(
            definitions={str(k): str(v) for k, v in definitions.items()},
            schemas={str(k): str(v) for k, v in schemas.items()},
        )


def resolve_config_path() -> Path:
    """Return the config file to use: env override, else first existing candidate."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    for candidate in CONFIG_FILES:
        if candidate.is_file():
            return candidate
    msg = (
        f"Cannot find config file, was looking at {CONFIG_FILES!r}. "
        "Run 'ceramic-notes bootstrap' first."
    )
    raise ConfigError(msg)


def load_app_config(path: Path | None = None) -> AppConfig:
    """Read the bootstrap-generated config file."""
    config_path = path or resolve_config_path()
    try:
        raw = config_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        msg = f"Config file {str(config_path)!r} not found"
        raise ConfigError(msg) from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        msg = f"Config file {str(config_path)!r} is not valid JSON: {e}"
        raise ConfigError(msg) from e
    return AppConfig.from_json(data)


def write_app_config(path: Path, config: AppConfig) -> None:
    """Write the config file, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_json()), encoding="utf-8")


def parse_seed(seed_hex: str) -> bytes:
    """Decode a hex seed and check it is 32 bytes long."""
    try:
        seed = bytes.fromhex(seed_hex.strip())
    except ValueError as e:
        msg = "Seed must be hex-encoded"
        raise ConfigError(msg) from e
    if len(seed) != SEED_LENGTH:
        msg = f"Seed must be {SEED_LENGTH} bytes, got {len(seed)}"
        raise ConfigError(msg)
    return seed


def load_seed() -> bytes:
    """Read the seed from the environment or the first seed file found."""
    env_seed = os.environ.get(SEED_ENV_VAR)
    if env_seed:
        return parse_seed(env_seed)
    for seed_path in SEED_FILES:
        try:
            return parse_seed(seed_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            pass
    msg = f"Cannot find seed, set {SEED_ENV_VAR} or create one of {SEED_FILES!r}"
    raise ConfigError(msg)
