# core/config_validator.py

from typing import List
from core.config import settings
from core.logging_config import logger


CONFIG_ERROR_DETAIL = "Configuration Error: Database connection parameters are missing."


def validate_required_config() -> List[str]:
    """
    Return the names of required environment variables that are not set.
    """
    missing = []

    if not settings.SUPABASE_URL:
        missing.append("SUPABASE_URL")
    if not settings.SUPABASE_SERVICE_ROLE_KEY:
        missing.append("SUPABASE_SERVICE_ROLE_KEY")

    return missing


def validate_optional_config() -> List[str]:
    warnings = []

    if not settings.SUPABASE_ANON_KEY:
        warnings.append("SUPABASE_ANON_KEY (optional but recommended)")

    return warnings


def is_backend_configured() -> bool:
    """Checked per request so a misconfigured deploy blocks instead of half-working."""
    return not validate_required_config()


def log_config_on_startup():
    """
    Log configuration problems at startup.
    Missing required config does not stop the process; every
    non-health request is answered with a blocking 503 instead.
    """
    missing_required = validate_required_config()
    missing_optional = validate_optional_config()

    if missing_required:
        logger.error(
            f"Missing required environment variables: {', '.join(missing_required)}"
        )

    for warning in missing_optional:
        logger.warning(f"Optional configuration missing: {warning}")

    if not missing_required:
        logger.info("Configuration validation passed")
