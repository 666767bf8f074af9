# ecgbill/config.py
import os
from dotenv import load_dotenv

# Load from .env file for local development
load_dotenv()


def get_env(key: str, default=None):
    """
    Get an environment variable from os.environ/.env.

    Parameters
    ----------
    key : str
        Environment variable name
    default : str, optional
        Default value if key not found
    """
    return os.getenv(key, default)


# -------- Tariff --------
DEFAULT_POLICY = get_env("ECGBILL_POLICY", "ecg-2025")

# -------- Logging --------
LOG_LEVEL = get_env("ECGBILL_LOG_LEVEL", "INFO").upper()
LOG_FILE = get_env("ECGBILL_LOG_FILE")
