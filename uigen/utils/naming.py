"""Project name generation for projects created during reconciliation.

Both helpers take their time/randomness source as an argument so callers
(and tests) can pin the generated names.
"""

import random
from datetime import datetime
from typing import Callable

from uigen.config import get_config


def format_clock_time(moment: datetime) -> str:
    """Render a time like a US-locale clock: '3:04:05 PM'."""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment:%M:%S} {meridiem}"


def adopted_project_name(clock: Callable[[], datetime] = datetime.now) -> str:
    """Name for a project created from anonymous work, e.g. 'Design from 3:04:05 PM'."""
    prefix = get_config().get("adopted_name_prefix", "Design from ")
    return f"{prefix}{format_clock_time(clock())}"


def default_project_name(rng: Callable[[], float] = random.random) -> str:
    """Name for a fresh empty project, e.g. 'New Design #48213'.

    ``rng`` must return a float in [0, 1); the suffix is ``int(rng() * range)``.
    """
    config = get_config()
    prefix = config.get("default_name_prefix", "New Design #")
    upper = config.get("default_name_range", 100000)
    return f"{prefix}{int(rng() * upper)}"
