"""
=============================================================================
CONFIGURATION
=============================================================================

Centralized settings for request parsing and logging.

    ┌─────────────────────────────────────────────────────────────────────┐
    │   Priority (highest to lowest):                                     │
    │                                                                     │
    │   1. Command-line arguments                                         │
    │      └── python -m parambind /request-param-v2 --log-level DEBUG    │
    │                                                                     │
    │   2. Environment variables                                          │
    │      └── PARAMBIND_LOG_LEVEL=DEBUG python -m parambind ...          │
    │                                                                     │
    │   3. Default values (in this dataclass)                             │
    └─────────────────────────────────────────────────────────────────────┘

Validate eagerly: a bad log level should fail at startup, not on the first
request that tries to log.

=============================================================================
"""

import logging
import os
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")

_TRUE_STRINGS = ("1", "true", "yes", "on")


@dataclass
class BinderConfig:
    """Configuration for the request parser, pipeline and logging."""

    # ─────────────────────────────────────────────────────────────────────
    # PARSING
    # ─────────────────────────────────────────────────────────────────────

    max_request_size: int = 10 * 1024 * 1024  # 10 MB
    """
    Maximum allowed request size in bytes (413 above it).
    """

    parse_form_body: bool = True
    """
    Read parameters from application/x-www-form-urlencoded bodies.
    When False only the query string feeds the parameter set.
    """

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────

    log_level: str = "INFO"
    """
    Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """

    log_format: str = "text"
    """
    Access log format: 'json' or 'text'.
    """

    # ─────────────────────────────────────────────────────────────────────
    # IDENTITY
    # ─────────────────────────────────────────────────────────────────────

    server_name: str = "parambind/1.0"
    """
    Value of the Server response header.
    """

    @classmethod
    def from_env(cls) -> "BinderConfig":
        """
        Create configuration from environment variables.

            PARAMBIND_MAX_REQUEST_SIZE  Request size limit in bytes
            PARAMBIND_PARSE_FORM        Parse form bodies (1/0, true/false)
            PARAMBIND_LOG_LEVEL         Logging level (default: INFO)
            PARAMBIND_LOG_FORMAT        text or json (default: text)
        """
        return cls(
            max_request_size=int(os.getenv("PARAMBIND_MAX_REQUEST_SIZE", str(10 * 1024 * 1024))),
            parse_form_body=os.getenv("PARAMBIND_PARSE_FORM", "true").lower() in _TRUE_STRINGS,
            log_level=os.getenv("PARAMBIND_LOG_LEVEL", "INFO"),
            log_format=os.getenv("PARAMBIND_LOG_FORMAT", "text"),
        )

    def validate(self) -> None:
        """Raise ValueError on the first invalid setting."""
        if self.max_request_size <= 0:
            raise ValueError(
                f"Invalid max_request_size: {self.max_request_size}. Must be > 0."
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. Must be one of {', '.join(LOG_LEVELS)}."
            )
        if self.log_format not in LOG_FORMATS:
            raise ValueError(
                f"Invalid log_format: {self.log_format}. Must be 'text' or 'json'."
            )


def setup_logging(config: BinderConfig) -> None:
    """Configure the root logger and the parambind logger from config."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.getLogger("parambind").setLevel(level)
