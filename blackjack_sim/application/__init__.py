"""
Application Layer - services built on the rules engine.

The application layer may use the core, the core never uses it.

Services:
    ConfigService: table rules and logging profiles
    TableService: one player against the dealer, round by round
"""

from .config_service import (
    ConfigService,
    ConfigType,
    LoggingConfig,
    TableRulesConfig,
    configure_logging,
)
from .table_service import TableService, TableSnapshot

__all__ = [
    "ConfigService",
    "ConfigType",
    "LoggingConfig",
    "TableRulesConfig",
    "configure_logging",
    "TableService",
    "TableSnapshot",
]
