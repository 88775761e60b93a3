"""Configuration handling for ilp-rejections."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import environ

DEFAULT_ILP_ADDRESS = 'unknown'
DEFAULT_LOG_LEVEL = 'info'
DEFAULT_LOG_JSON = True

LOG_LEVELS = ('debug', 'info', 'warning', 'error')

ILP_ADDRESS_PATTERN = re.compile(
    r'^(g|private|example|peer|self|test[1-3]?|local)([.][a-zA-Z0-9_~-]+)+$'
)


@dataclass(slots=True)
class Config:
    """Configuration settings for rejection handling.

    Values can be customized via environment variables or direct instantiation.

    Environment Variables:
        ILP_ADDRESS: Own ILP address, reported as ``triggeredBy`` (default: unknown)
        ILP_LOG_LEVEL: One of debug, info, warning, error (default: info)
        ILP_LOG_JSON: Render log lines as JSON when true (default: true)

    Example:
        >>> config = Config.from_env()
        >>>
        >>> # Or configure directly
        >>> config = Config(ilp_address='g.connector', log_level='debug')
    """

    ilp_address: str = DEFAULT_ILP_ADDRESS
    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = DEFAULT_LOG_JSON

    @classmethod
    def from_env(cls) -> Config:
        """Create a configuration instance from environment variables.

        Returns:
            Validated Config instance with values from environment or defaults.

        Raises:
            ValueError: If any configuration value is invalid.
        """

        ilp_address = environ.get('ILP_ADDRESS', '').strip() or DEFAULT_ILP_ADDRESS
        log_level = (environ.get('ILP_LOG_LEVEL') or DEFAULT_LOG_LEVEL).lower()
        log_json = _read_bool('ILP_LOG_JSON', DEFAULT_LOG_JSON)

        return cls(
            ilp_address=ilp_address,
            log_level=log_level,
            log_json=log_json,
        )._validate()

    def _validate(self) -> Config:
        """Validate all configuration values.

        Returns:
            Self for method chaining.

        Raises:
            ValueError: If any configuration value is invalid with descriptive message.
        """
        # 'unknown' stands in until the address is learned from a parent
        if self.ilp_address != DEFAULT_ILP_ADDRESS and not ILP_ADDRESS_PATTERN.match(
            self.ilp_address
        ):
            raise ValueError(f'Invalid ilp_address: {self.ilp_address}')
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f'log_level must be one of {", ".join(LOG_LEVELS)}: {self.log_level}'
            )

        return self


def _read_bool(name: str, default: bool) -> bool:
    raw = environ.get(name)
    if not raw:
        return default
    value = raw.strip().lower()
    if value in ('1', 'true', 'yes', 'on'):
        return True
    if value in ('0', 'false', 'no', 'off'):
        return False
    return default
