"""Configuration for the council.

Loads settings from config.yaml if present, falls back to defaults.
API keys are always loaded from environment variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv

from .errors import ConfigError

PROVIDERS = ("openrouter", "ollama")

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
OLLAMA_BASE_URL = "http://localhost:11434"

# Labels are single letters, so a council cannot anonymize more responses than this
MAX_COUNCIL_SIZE = 26

DEFAULT_TIMEOUT = 120.0

CONFIG_ENV_VAR = "PEER_COUNCIL_CONFIG"

# Defaults (used if config.yaml is missing)
_DEFAULTS = {
    "provider": "openrouter",
    "council_models": [
        "openai/gpt-4o-mini",
        "x-ai/grok-3",
        "deepseek/deepseek-chat",
    ],
    "chairman_model": "openai/gpt-4o-mini",
    "base_url": None,
    "timeout": DEFAULT_TIMEOUT,
    "verbose": False,
}


@dataclass
class CouncilConfig:
    """Everything a council run needs to know before it starts."""

    provider: str
    models: list[str]
    chairman_model: str
    api_key: str | None = None
    base_url: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    verbose: bool = False

    def validate(self) -> "CouncilConfig":
        """Raise ConfigError if the configuration cannot be used to start a run."""
        if self.provider not in PROVIDERS:
            raise ConfigError(
                f"Unknown provider {self.provider!r} (expected one of: {', '.join(PROVIDERS)})"
            )
        if self.provider == "openrouter" and not self.api_key:
            raise ConfigError("api_key is required for the openrouter provider")
        if not isinstance(self.models, (list, tuple)):
            raise ConfigError(
                f"council_models must be a list, got {type(self.models).__name__}"
            )
        if not self.models:
            raise ConfigError("At least one council model must be configured")
        if any(not isinstance(m, str) or not m.strip() for m in self.models):
            raise ConfigError("Council model names must be non-empty strings")
        if len(self.models) > MAX_COUNCIL_SIZE:
            raise ConfigError(
                f"At most {MAX_COUNCIL_SIZE} council models are supported, got {len(self.models)}"
            )
        if not isinstance(self.chairman_model, str) or not self.chairman_model.strip():
            raise ConfigError("chairman_model is required and must be a string")
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
            raise ConfigError(f"timeout must be a number, got {self.timeout!r}")
        if not isinstance(self.verbose, bool):
            raise ConfigError(f"verbose must be true or false, got {self.verbose!r}")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")
        return self

    @property
    def resolved_base_url(self) -> str:
        if self.base_url:
            return self.base_url.rstrip("/")
        return OPENROUTER_BASE_URL if self.provider == "openrouter" else OLLAMA_BASE_URL


def _read_yaml(path: Path) -> dict:
    """Load a YAML mapping, treating an empty file as no overrides."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")
    return data


def _resolve_config_path(path: str | os.PathLike | None) -> Path | None:
    if path is not None:
        resolved = Path(path)
        if not resolved.exists():
            raise ConfigError(f"Config file not found: {resolved}")
        return resolved
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return _resolve_config_path(env_path)
    default = Path.cwd() / "config.yaml"
    return default if default.exists() else None


def load_config(path: str | os.PathLike | None = None, **overrides) -> CouncilConfig:
    """
    Build a validated CouncilConfig.

    Args:
        path: Optional YAML file; otherwise $PEER_COUNCIL_CONFIG or ./config.yaml
        **overrides: Values that win over both the file and the defaults
            (``None`` values are ignored)

    Returns:
        Validated configuration

    Raises:
        ConfigError: If the file is unreadable or the result is invalid
    """
    load_dotenv()

    config_path = _resolve_config_path(path)
    file_values = _read_yaml(config_path) if config_path else {}
    # Merge with defaults (config values override defaults)
    merged = {**_DEFAULTS, **file_values}
    merged.update({k: v for k, v in overrides.items() if v is not None})

    if "api_key" in file_values:
        raise ConfigError("API keys must come from the environment, not the config file")

    models = merged["council_models"]
    if models is None:
        models = []
    if not isinstance(models, list):
        raise ConfigError(f"council_models must be a list, got {models!r}")

    timeout = merged["timeout"]
    if isinstance(timeout, bool):
        raise ConfigError(f"timeout must be a number, got {timeout!r}")
    try:
        timeout = float(timeout)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"timeout must be a number, got {timeout!r}") from e

    config = CouncilConfig(
        provider=merged["provider"],
        models=list(models),
        chairman_model=merged["chairman_model"],
        # API key from environment (never in config file)
        api_key=merged.get("api_key") or os.getenv("OPENROUTER_API_KEY"),
        base_url=merged["base_url"],
        timeout=timeout,
        verbose=merged["verbose"],
    )
    return config.validate()
