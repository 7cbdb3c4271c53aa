"""Settings read from the environment (and a local .env file)."""

import os
from dotenv import load_dotenv

load_dotenv()


def get_group_id() -> int:
    """Group used by the scripts; 0 means the default group (14).

    Returns:
        Group ID from DH_GROUP_ID

    Raises:
        ValueError if DH_GROUP_ID is not an integer
    """
    value = os.getenv("DH_GROUP_ID", "0")
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"DH_GROUP_ID must be an integer, got {value!r}")


def get_params_dir() -> str:
    """Directory where exported DH parameter files are written."""
    return os.getenv("DH_PARAMS_DIR", "params")
