"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Database operations (SQLite)
- Logging (Loguru)
- Console management (Rich)
"""

# Configuration
from .config import (
    Config,
    LoggingConfig,
    QuotaConfig,
    SearchConfig,
    WebConfig,
    load_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    create_default_config,
)

# Database
from .database import (
    SCHEMA_VERSION,
    get_database_path,
    get_db_connection,
    init_database,
)

# Logging
from .output import log, setup_loguru, setup_from_config

# Console
from .console import get_console

__all__ = [
    # Config
    "Config",
    "LoggingConfig",
    "QuotaConfig",
    "SearchConfig",
    "WebConfig",
    "load_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "create_default_config",
    # Database
    "SCHEMA_VERSION",
    "get_database_path",
    "get_db_connection",
    "init_database",
    # Logging
    "log",
    "setup_loguru",
    "setup_from_config",
    # Console
    "get_console",
]
