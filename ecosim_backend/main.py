"""Headless backend entry point.

Builds a runner through :func:`create_runner` and keeps the tick loop alive
until interrupted.
"""

import logging
import os
import threading
from typing import Optional

from ecosim.config.simulation_config import SimulationConfig
from ecosim_backend.logging_config import configure_logging
from ecosim_backend.simulation_runner import SimulationRunner

SEED_ENV_VAR = "ECOSIM_SEED"


def create_runner(
    config: Optional[SimulationConfig] = None,
    *,
    seed: Optional[int] = None,
) -> SimulationRunner:
    """Configure logging and build a runner (not yet started).

    ``seed`` falls back to the ``ECOSIM_SEED`` env var when not provided.
    """
    # Configure logging (idempotent)
    logger = configure_logging()

    if seed is None:
        raw_seed = os.getenv(SEED_ENV_VAR)
        seed = int(raw_seed) if raw_seed else None

    runner = SimulationRunner(config=config, seed=seed)
    logger.info(f"Runner created (run_id={runner.engine.run_id}, seed={seed})")
    return runner


def main() -> None:
    """Run the simulation until Ctrl+C."""
    runner = create_runner()
    runner.start()
    try:
        threading.Event().wait()
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Interrupted, stopping runner")
    finally:
        runner.close()


if __name__ == "__main__":
    main()
