"""RNG utilities for deterministic simulation.

Every random draw in the core goes through an explicitly passed
``random.Random``. These helpers fail loudly when one is missing rather than
silently creating an unseeded fallback.
"""

import random
import uuid
from typing import Optional


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This indicates a bug in the simulation setup: the engine owns the RNG and
    must hand it to every phase that draws random numbers.
    """
    pass


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        rng = require_rng_param(rng, "create_offspring")
        jitter = rng.uniform(-3, 3)
    """
    if rng is None:
        raise MissingRNGError(
            f"RNG required: {context}. Pass the engine RNG explicitly."
        )
    return rng


def new_organism_id(rng: random.Random) -> str:
    """Generate a uuid4-formatted organism id from the simulation RNG.

    Drawing the bits from the seeded RNG keeps ids reproducible across
    seeded runs.
    """
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))
