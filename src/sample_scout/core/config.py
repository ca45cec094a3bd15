"""
Configuration management for Sample Scout
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger


@dataclass
class SearchConfig:
    """Configuration for sound search ranking."""

    bpm_tolerance: int = 5  # Allow +/- this many BPM
    min_match_score: float = 2.0  # At least one exact tag match


@dataclass
class QuotaConfig:
    """Configuration for per-user search limits."""

    enabled: bool = True
    free_search_limit: int = 15

    def validate(self) -> None:
        """Validate quota configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.free_search_limit < 0:
            raise ValueError(
                f"free_search_limit must be >= 0, got {self.free_search_limit}"
            )


@dataclass
class WebConfig:
    """Configuration for the FastAPI backend."""

    host: str = "127.0.0.1"
    port: int = 8642
    allowed_origins: List[str] = field(
        default_factory=lambda: ["http://localhost:5173"]
    )
    admin_email: str = ""  # Only this user may register uploaded sounds


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/sample-scout/sample-scout.log)
    )
    console_output: bool = False  # Also output to console (for debugging)


@dataclass
class Config:
    """Main configuration object."""

    search: SearchConfig = field(default_factory=SearchConfig)
    quota: QuotaConfig = field(default_factory=QuotaConfig)
    web: WebConfig = field(default_factory=WebConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "sample-scout"
    return Path.home() / ".config" / "sample-scout"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in project root by looking for pyproject.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            if config_path.exists():
                return config_path
            # Found project root but no config.toml there
            return None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/sample-scout (or ~/.config/sample-scout)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "sample-scout"
    return Path.home() / ".local" / "share" / "sample-scout"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Sample Scout Configuration

[search]
# Allowed BPM difference when a BPM filter is given
bpm_tolerance = 5

# Minimum tag score to include a sound (2 = one exact tag match)
min_match_score = 2.0

[quota]
# Limit searches for non-premium users
enabled = true

# Number of searches a free user may run
free_search_limit = 15

[web]
host = "127.0.0.1"
port = 8642

# Origins allowed by CORS (override with ALLOWED_ORIGINS)
allowed_origins = ["http://localhost:5173"]

# Email of the user allowed to register uploaded sounds
# admin_email = "admin@example.com"

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/sample-scout/sample-scout.log)
# log_file = "/path/to/custom/sample-scout.log"

# Also output logs to console (useful for debugging)
console_output = false
""".strip()


def _apply_env_overrides(config: Config) -> Config:
    """Override TOML values with environment variables if present."""
    admin_email = os.environ.get("SAMPLE_SCOUT_ADMIN_EMAIL")
    if admin_email:
        config.web.admin_email = admin_email

    allowed_origins = os.environ.get("ALLOWED_ORIGINS", "")
    if allowed_origins:
        config.web.allowed_origins = [
            origin.strip() for origin in allowed_origins.split(",") if origin.strip()
        ]

    free_limit = os.environ.get("SAMPLE_SCOUT_FREE_SEARCH_LIMIT")
    if free_limit:
        try:
            config.quota.free_search_limit = int(free_limit)
        except ValueError:
            logger.warning(
                f"Ignoring non-integer SAMPLE_SCOUT_FREE_SEARCH_LIMIT: {free_limit!r}"
            )

    return config


def load_config() -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - SAMPLE_SCOUT_ADMIN_EMAIL
    - ALLOWED_ORIGINS
    - SAMPLE_SCOUT_FREE_SEARCH_LIMIT
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = get_config_path()

    if not config_path.exists():
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(create_default_config())
            logger.info(f"Created default configuration at: {config_path}")
        except OSError as e:
            logger.warning(f"Could not write default configuration to {config_path}: {e}")
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        config = Config()

        if "search" in toml_data:
            search_data = toml_data["search"]
            config.search = SearchConfig(
                bpm_tolerance=search_data.get(
                    "bpm_tolerance", config.search.bpm_tolerance
                ),
                min_match_score=float(
                    search_data.get("min_match_score", config.search.min_match_score)
                ),
            )

        if "quota" in toml_data:
            quota_data = toml_data["quota"]
            config.quota = QuotaConfig(
                enabled=quota_data.get("enabled", config.quota.enabled),
                free_search_limit=quota_data.get(
                    "free_search_limit", config.quota.free_search_limit
                ),
            )
            try:
                config.quota.validate()
            except ValueError as e:
                logger.warning(f"Invalid quota configuration: {e}. Using defaults.")
                config.quota = QuotaConfig()

        if "web" in toml_data:
            web_data = toml_data["web"]
            config.web = WebConfig(
                host=web_data.get("host", config.web.host),
                port=web_data.get("port", config.web.port),
                allowed_origins=web_data.get(
                    "allowed_origins", config.web.allowed_origins
                ),
                admin_email=web_data.get("admin_email", config.web.admin_email),
            )

        if "logging" in toml_data:
            logging_data = toml_data["logging"]
            log_file = logging_data.get("log_file")
            if log_file:
                log_file = str(Path(log_file).expanduser())
            config.logging = LoggingConfig(
                level=logging_data.get("level", config.logging.level).upper(),
                log_file=log_file,
                console_output=logging_data.get(
                    "console_output", config.logging.console_output
                ),
            )

        return _apply_env_overrides(config)

    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.error(f"Error loading configuration from {config_path}: {e}")
        logger.info("Using default configuration.")
        return _apply_env_overrides(Config())
