"""Library settings configuration."""

import logging
import sys

from neuroglia.hosting.abstractions import ApplicationSettings


class Settings(ApplicationSettings):
    """Settings controlling how handlers are discovered and registered."""

    log_level: str = "INFO"

    # Discovery Configuration
    handler_modules: list[str] = []  # Dotted names of the modules/packages scanned for handlers
    scan_submodules: bool = True  # Walk packages into their submodules
    duplicate_handler_policy: str = "raise"  # raise, first_wins, last_wins

    class Config:
        env_prefix = "CQRS_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Ignore extra environment variables


app_settings = Settings()


def configure_logging(log_level: str = "INFO") -> None:
    """
    Configure application-wide logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # OpenTelemetry is silent unless an SDK is installed, keep its diagnostics quiet
    logging.getLogger("opentelemetry").setLevel(logging.WARNING)
