"""
Configuration for the node endpoint.

The endpoint comes from FUEL_NODE_URL, which may be set in the process
environment or in ~/.fuelprovider/.env.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_NODE_URL = "http://127.0.0.1:4000/graphql"

FUELPROVIDER_DIR = Path.home() / ".fuelprovider"
FUELPROVIDER_ENV = FUELPROVIDER_DIR / ".env"


def load_env(env_path: Optional[Path] = None) -> bool:
    """
    Load variables from the .env file into the environment.

    Variables already set in the environment take precedence.

    Returns:
        True if a .env file was found and loaded
    """
    env_path = env_path or FUELPROVIDER_ENV
    if not env_path.exists():
        return False
    return load_dotenv(env_path, override=False)


def get_node_url() -> str:
    """Get the node GraphQL URL from environment or default."""
    return os.environ.get("FUEL_NODE_URL", DEFAULT_NODE_URL)
