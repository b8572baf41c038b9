"""
Runtime settings for the game driver.

Values come from the environment (or a .env file) and fall back to the
defaults of the terminal client.
"""
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# Milliseconds between two ticks
TICK_DELAY_MS = int(os.getenv('SNAKE_TICK_DELAY_MS', '500'))

# Safety stop for unattended runs
MAX_ROUNDS = int(os.getenv('SNAKE_MAX_ROUNDS', '1000'))

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()


def get_seed() -> Optional[int]:
    """Return SNAKE_SEED as an int, or None when unset."""
    seed = os.getenv('SNAKE_SEED')
    if seed is None or seed.strip() == '':
        return None
    return int(seed)
