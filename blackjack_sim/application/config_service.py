"""
ConfigService - configuration management service.

Central place for the table rules and logging configuration:
- named profiles per configuration type
- validated updates
- JSON override files, applied all-or-nothing
"""

import json
import logging
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..core.exceptions import GameConfigError
from ..core.rules import ErrorCode, OperationResult

_INTEGER_RULES = ('number_of_packs', 'reset_when_remaining', 'value_limit', 'dealer_stop_value')
_AMOUNT_RULES = ('starting_balance', 'default_bet')


class ConfigType(Enum):
    """Configuration type."""
    TABLE_RULES = "table_rules"
    LOGGING = "logging"


@dataclass
class TableRulesConfig:
    """Table rules configuration."""
    number_of_packs: int = 10
    reset_when_remaining: int = 1
    value_limit: int = 21
    dealer_stop_value: int = 17
    starting_balance: float = 1000
    default_bet: float = 5
    random_seed: Optional[int] = None

    def __post_init__(self):
        """Validate the rules."""
        for name in _INTEGER_RULES:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise GameConfigError(f"{name} must be an integer: {value!r}")
        for name in _AMOUNT_RULES:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise GameConfigError(f"{name} must be a number: {value!r}")

        if self.number_of_packs < 1:
            raise GameConfigError(f"number_of_packs must be at least 1: {self.number_of_packs}")
        if self.reset_when_remaining < 0:
            raise GameConfigError(f"reset_when_remaining cannot be negative: {self.reset_when_remaining}")
        if self.value_limit < 2:
            raise GameConfigError(f"value_limit too small: {self.value_limit}")
        if not 0 < self.dealer_stop_value <= self.value_limit:
            raise GameConfigError(
                f"dealer_stop_value ({self.dealer_stop_value}) must be within 1-{self.value_limit}"
            )
        if self.starting_balance < 0:
            raise GameConfigError(f"starting_balance cannot be negative: {self.starting_balance}")
        if self.default_bet < 0:
            raise GameConfigError(f"default_bet cannot be negative: {self.default_bet}")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __post_init__(self):
        if not isinstance(self.log_level, str):
            raise GameConfigError(f"log_level must be a level name: {self.log_level!r}")
        if not isinstance(self.log_format, str):
            raise GameConfigError(f"log_format must be a string: {self.log_format!r}")
        if logging.getLevelName(self.log_level.upper()) not in (
                logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
            raise GameConfigError(f"Unknown log level: {self.log_level}")
        self.log_level = self.log_level.upper()


class ConfigService:
    """Configuration management service."""

    def __init__(self):
        """Initialise the service with the built-in profiles."""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, Any]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """Load the built-in profiles."""
        self._configs[ConfigType.TABLE_RULES] = {
            # ten packs reshuffled at the last card
            'default': TableRulesConfig(),
            'single_deck': TableRulesConfig(
                number_of_packs=1,
                reset_when_remaining=0,
            ),
            'six_deck': TableRulesConfig(
                number_of_packs=6,
                reset_when_remaining=78,
                default_bet=10,
            ),
        }

        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
            'quiet': LoggingConfig(log_level='WARNING', log_format='%(levelname)s: %(message)s'),
        }

        self.logger.debug("Default configuration loaded")

    def resolve_profile(self, config_type: ConfigType, profile: str) -> str:
        """
        Name of the profile that lookups for ``profile`` actually use.

        Unknown names resolve to 'default' with a warning.
        """
        if profile not in self._configs[config_type]:
            self.logger.warning("Profile '%s' not found for %s, using default", profile, config_type.value)
            return 'default'
        return profile

    def _get_profile(self, config_type: ConfigType, profile: str):
        return self._configs[config_type][self.resolve_profile(config_type, profile)]

    def get_table_rules_config(self, profile: str = "default") -> OperationResult[TableRulesConfig]:
        """
        Get a table rules profile.

        Args:
            profile: profile name (default, single_deck, six_deck)

        Returns:
            OperationResult: the rules, falling back to default for unknown names
        """
        return OperationResult.success_result(self._get_profile(ConfigType.TABLE_RULES, profile))

    def get_logging_config(self, profile: str = "default") -> OperationResult[LoggingConfig]:
        """
        Get a logging profile.

        Args:
            profile: profile name (default, debug, quiet)

        Returns:
            OperationResult: the logging config, falling back to default
        """
        return OperationResult.success_result(self._get_profile(ConfigType.LOGGING, profile))

    def _build_update(self, config_type: ConfigType, profile: str,
                      updates: Dict[str, Any]) -> OperationResult:
        """Validate an update without storing it; the data is the rebuilt profile."""
        if config_type not in self._configs:
            return OperationResult.failure_result(
                f"Configuration type {config_type} does not exist",
                ErrorCode.CONFIG_TYPE_NOT_FOUND
            )

        config_profiles = self._configs[config_type]
        if profile not in config_profiles:
            return OperationResult.failure_result(
                f"Profile {profile} does not exist",
                ErrorCode.CONFIG_PROFILE_NOT_FOUND
            )

        if not isinstance(updates, dict):
            return OperationResult.failure_result(
                f"Updates for {config_type.value} must be a mapping of field names to values",
                ErrorCode.INVALID_CONFIG_VALUE
            )

        current_config = config_profiles[profile]
        known_fields = {f.name for f in fields(current_config)}
        unknown = sorted(set(updates) - known_fields)
        if unknown:
            return OperationResult.failure_result(
                f"Unknown fields for {config_type.value}: {', '.join(unknown)}",
                ErrorCode.UNKNOWN_CONFIG_FIELD
            )

        try:
            return OperationResult.success_result(replace(current_config, **updates))
        except (GameConfigError, TypeError) as e:
            return OperationResult.failure_result(str(e), ErrorCode.INVALID_CONFIG_VALUE)

    def update_config(self, config_type: ConfigType, profile: str,
                      updates: Dict[str, Any]) -> OperationResult[bool]:
        """
        Update fields of an existing profile.

        The updated profile is rebuilt so it is validated as a whole; on
        failure the stored profile is left unchanged.

        Args:
            config_type: configuration type
            profile: profile name
            updates: field values to change

        Returns:
            OperationResult: True on success
        """
        result = self._build_update(config_type, profile, updates)
        if not result.success:
            return result

        self._configs[config_type][profile] = result.data
        self.logger.info("Configuration %s.%s updated", config_type.value, profile)
        return OperationResult.success_result(True)

    def list_available_profiles(self, config_type: ConfigType) -> OperationResult[List[str]]:
        """
        List the profiles of a configuration type.

        Returns:
            OperationResult: profile names
        """
        if config_type not in self._configs:
            return OperationResult.failure_result(
                f"Configuration type {config_type} does not exist",
                ErrorCode.CONFIG_TYPE_NOT_FOUND
            )
        return OperationResult.success_result(list(self._configs[config_type].keys()))

    def get_merged_config(self, config_type: ConfigType, profile: str = "default") -> OperationResult[Dict[str, Any]]:
        """
        Get a profile as a plain dictionary.

        Returns:
            OperationResult: the profile's fields
        """
        if config_type not in self._configs:
            return OperationResult.failure_result(
                f"Unsupported configuration type: {config_type}",
                ErrorCode.CONFIG_TYPE_NOT_FOUND
            )
        return OperationResult.success_result(asdict(self._get_profile(config_type, profile)))

    def load_overrides(self, path: Union[str, Path],
                       profiles: Optional[Dict[ConfigType, str]] = None) -> OperationResult[bool]:
        """
        Merge a JSON override file into the configuration profiles.

        The file holds one object per configuration type, e.g.
        ``{"table_rules": {"number_of_packs": 6}, "logging": {"log_level": "DEBUG"}}``.
        Every section is validated before any is stored, so a failed load
        leaves all profiles unchanged.

        Args:
            path: path of the JSON file
            profiles: profile each configuration type's section is merged
                into; types not listed use 'default', unknown names resolve
                as they do for lookups

        Returns:
            OperationResult: True when every section applied
        """
        try:
            with open(path, encoding="utf-8") as f:
                overrides = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            return OperationResult.failure_result(
                f"Cannot read configuration file {path}: {e}",
                ErrorCode.CONFIG_FILE_UNREADABLE
            )

        if not isinstance(overrides, dict):
            return OperationResult.failure_result(
                "Configuration file must contain a JSON object",
                ErrorCode.CONFIG_FILE_INVALID
            )

        profiles = profiles or {}
        staged = []
        for section, updates in overrides.items():
            try:
                config_type = ConfigType(section)
            except ValueError:
                return OperationResult.failure_result(
                    f"Unknown configuration section: {section}",
                    ErrorCode.CONFIG_TYPE_NOT_FOUND
                )
            if not isinstance(updates, dict):
                return OperationResult.failure_result(
                    f"Section '{section}' must be a JSON object",
                    ErrorCode.CONFIG_FILE_INVALID
                )

            profile = self.resolve_profile(config_type, profiles.get(config_type, 'default'))
            result = self._build_update(config_type, profile, updates)
            if not result.success:
                return result
            staged.append((config_type, profile, result.data))

        for config_type, profile, config in staged:
            self._configs[config_type][profile] = config
        self.logger.info("Configuration overrides loaded from %s", path)
        return OperationResult.success_result(True)


def configure_logging(config: LoggingConfig) -> None:
    """
    Apply a logging configuration to the root logger.

    Args:
        config: logging configuration to apply
    """
    logging.basicConfig(level=config.log_level, format=config.log_format, force=True)
