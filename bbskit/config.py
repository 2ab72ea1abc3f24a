# config.py
# Centralized configuration for BBSKit
# Version: 1.0.0

import os
from typing import List

from dotenv import load_dotenv

from .exceptions import ConfigurationError

load_dotenv()

# ============================================================================
# ENVIRONMENT
# ============================================================================
ENVIRONMENT = os.getenv("BBSKIT_ENVIRONMENT", "development")

# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================
LOG_LEVEL = os.getenv("BBSKIT_LOG_LEVEL", "INFO")
LOG_TO_FILE = os.getenv("BBSKIT_LOG_TO_FILE", "false").lower() == "true"
LOG_FILE_PATH = os.getenv("BBSKIT_LOG_FILE_PATH", "./logs/bbskit.log")

# ============================================================================
# USERNAME RULE DEFAULTS
# ============================================================================
USERNAME_MIN_LENGTH = int(os.getenv("BBSKIT_USERNAME_MIN_LENGTH", "1"))
USERNAME_MAX_LENGTH = int(os.getenv("BBSKIT_USERNAME_MAX_LENGTH", "64"))

# ============================================================================
# PASSWORD RULE DEFAULTS
# ============================================================================
PASSWORD_MIN_LENGTH = int(os.getenv("BBSKIT_PASSWORD_MIN_LENGTH", "8"))
PASSWORD_MAX_LENGTH = int(os.getenv("BBSKIT_PASSWORD_MAX_LENGTH", "128"))

# ============================================================================
# TEXT
# ============================================================================
DEFAULT_ELLIPSIS = os.getenv("BBSKIT_DEFAULT_ELLIPSIS", "...")

# ============================================================================
# DATASTORE
# ============================================================================
DATASTORE_DEFAULT_TTL = float(os.getenv("BBSKIT_DATASTORE_DEFAULT_TTL", "0"))  # seconds, 0 = never


# ============================================================================
# VALIDATION
# ============================================================================
def validate_config() -> List[str]:
    """
    Check configuration values for inconsistencies.

    Returns:
        List of problems found (empty when the configuration is sane)

    Raises:
        ConfigurationError: If problems are found in production
    """
    errors = []

    if USERNAME_MIN_LENGTH < 0:
        errors.append("BBSKIT_USERNAME_MIN_LENGTH must not be negative")
    if USERNAME_MIN_LENGTH > USERNAME_MAX_LENGTH:
        errors.append("BBSKIT_USERNAME_MIN_LENGTH is greater than BBSKIT_USERNAME_MAX_LENGTH")

    if PASSWORD_MIN_LENGTH < 0:
        errors.append("BBSKIT_PASSWORD_MIN_LENGTH must not be negative")
    if PASSWORD_MIN_LENGTH > PASSWORD_MAX_LENGTH:
        errors.append("BBSKIT_PASSWORD_MIN_LENGTH is greater than BBSKIT_PASSWORD_MAX_LENGTH")

    if DATASTORE_DEFAULT_TTL < 0:
        errors.append("BBSKIT_DATASTORE_DEFAULT_TTL must not be negative")

    if LOG_LEVEL.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        errors.append(f"BBSKIT_LOG_LEVEL has unknown value: {LOG_LEVEL}")

    if errors and ENVIRONMENT == "production":
        raise ConfigurationError(
            "Invalid BBSKit configuration",
            context={"errors": errors},
        )

    return errors
