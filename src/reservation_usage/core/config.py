# src/reservation_usage/core/config.py

import logging
import os

from dotenv import load_dotenv

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

SECRETS_DIR = "/etc/reservation-usage/secrets"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    def __init__(self):
        # --- Region and secrets, read once per process ---
        self.AWS_DEFAULT_REGION = os.getenv("AWS_DEFAULT_REGION", "").strip()
        self.VERIFICATION_TOKEN = self._get_secret("VERIFICATION_TOKEN")

    @staticmethod
    def _get_secret(key: str, default: str = None) -> str:
        """
        Retrieves a secret from a file (Docker secret/volume) or falls back to environment variable.

        Raises:
            PermissionError: If the secret file exists but cannot be read due to permissions.
            IOError: If the secret file exists but cannot be read due to I/O errors.
        """
        secret_file = os.path.join(SECRETS_DIR, key)
        if os.path.exists(secret_file):
            try:
                with open(secret_file, "r") as f:
                    value = f.read().strip()
                    logging.getLogger(__name__).debug(f"Loaded secret '{key}' from {secret_file}")
                    return value
            except PermissionError as e:
                raise PermissionError(
                    f"Secret file '{secret_file}' exists but cannot be read due to permission denied. "
                    f"Please check file permissions or run with appropriate privileges."
                ) from e
            except (IOError, OSError) as e:
                raise IOError(
                    f"Secret file '{secret_file}' exists but cannot be read: {e}. "
                    f"Please check the file integrity and system resources."
                ) from e
        return os.getenv(key, default)

    # --- Cache lifetimes ---
    RESERVATIONS_TTL_SECONDS = float(os.getenv("RESERVATIONS_TTL_SECONDS", "3600"))
    INSTANCES_TTL_SECONDS = float(os.getenv("INSTANCES_TTL_SECONDS", "300"))

    # --- Provider-specific markers ---
    EMR_TAG_KEY = os.getenv("EMR_TAG_KEY", "aws:elasticmapreduce:job-flow-id")
    REGIONAL_SCOPE = os.getenv("REGIONAL_SCOPE", "Region")

    # --- Logging variables ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # --- API variables ---
    API_HOST = os.getenv("API_HOST", "0.0.0.0")
    API_PORT = int(os.getenv("API_PORT", "8000"))

    def validate_instance(self):
        if self.RESERVATIONS_TTL_SECONDS <= 0:
            raise ValueError("RESERVATIONS_TTL_SECONDS must be a positive number of seconds.")
        if self.INSTANCES_TTL_SECONDS <= 0:
            raise ValueError("INSTANCES_TTL_SECONDS must be a positive number of seconds.")
        if self.LOG_LEVEL.upper() not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}.")
        if not self.AWS_DEFAULT_REGION:
            logging.warning("AWS_DEFAULT_REGION is not set; every request must name a region.")
        if not self.VERIFICATION_TOKEN:
            logging.warning("VERIFICATION_TOKEN is not set; all HTTP requests will be rejected.")


# Instantiate the config to be imported by other modules
config = Config()
config.validate_instance()
