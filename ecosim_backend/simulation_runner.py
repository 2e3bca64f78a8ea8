"""Background simulation runner driven by a timer chain."""

import logging
import threading
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from ecosim.config.simulation_config import SimulationConfig
from ecosim.events.domain_events import FeedingEvent, MovementEvent, ReproductionEvent
from ecosim.exceptions import EcosimError
from ecosim.math_utils import Position
from ecosim.simulation.engine import SimulationEngine
from ecosim_backend.event_log import EventLog
from ecosim_backend.models import (
    BiomeCommand,
    CommandResponse,
    LevelCommand,
    PlaceOrganismCommand,
    RemoveOrganismCommand,
    SeasonCommand,
    SeasonLengthCommand,
    SpeedCommand,
)
from ecosim_backend.state_payloads import StatePayload, StatsPayload
from ecosim_backend.stats_history import StatsHistory

logger = logging.getLogger(__name__)

DISPLAYED_EVENT_TYPES = (ReproductionEvent, FeedingEvent, MovementEvent)


class SimulationRunner:
    """Runs the engine on a ``threading.Timer`` chain and dispatches commands.

    Exactly one timer is pending at a time. Pausing cancels it, resuming
    schedules a fresh one, and a speed change replaces it with one at the
    new interval. ``lock`` serialises ticks and commands so a command never
    observes a half-committed tick.
    """

    def __init__(
        self,
        engine: Optional[SimulationEngine] = None,
        *,
        config: Optional[SimulationConfig] = None,
        seed: Optional[int] = None,
        event_log: Optional[EventLog] = None,
        stats_history: Optional[StatsHistory] = None,
    ):
        """Initialize the runner.

        Args:
            engine: Existing engine to drive (built from config/seed otherwise)
            config: Configuration for a newly built engine
            seed: Optional random seed for deterministic behavior
            event_log: Retention window for displayed events
            stats_history: Periodic statistics recorder
        """
        self.engine = engine or SimulationEngine(config, seed=seed)
        self.event_log = event_log or EventLog()
        self.stats_history = stats_history or StatsHistory()
        self.lock = threading.Lock()
        self.running = False
        self.tick_errors = 0
        self._timer: Optional[threading.Timer] = None

        for event_type in DISPLAYED_EVENT_TYPES:
            self.engine.event_bus.subscribe(event_type, self.event_log.append)

    def _create_error_response(self, error_msg: str) -> Dict[str, Any]:
        """Create a standardized error response.

        Args:
            error_msg: The error message to return

        Returns:
            Dictionary with success=False and error message
        """
        return CommandResponse(success=False, error=error_msg).model_dump(exclude_none=True)

    @staticmethod
    def _ok(**fields: Any) -> Dict[str, Any]:
        return CommandResponse(**fields).model_dump(exclude_none=True)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start ticking; a paused engine waits for ``resume``."""
        with self.lock:
            if self.running:
                return
            self.running = True
            self._schedule()
        logger.info(f"SimulationRunner started (run_id={self.engine.run_id})")

    def stop(self) -> None:
        with self.lock:
            self.running = False
            self._cancel_timer()
        logger.info("SimulationRunner stopped")

    def close(self) -> None:
        """Stop ticking and detach the event log from the engine's bus."""
        self.stop()
        for event_type in DISPLAYED_EVENT_TYPES:
            self.engine.event_bus.unsubscribe(event_type, self.event_log.append)

    @property
    def timer_active(self) -> bool:
        return self._timer is not None

    def _schedule(self) -> None:
        """Arm the next timer. Caller holds ``lock``."""
        self._cancel_timer()
        if not self.running or self.engine.paused:
            return
        interval_s = self.engine.tick_interval_ms / 1000.0
        timer = threading.Timer(interval_s, self._on_timer)
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_timer(self) -> None:
        with self.lock:
            # A timer replaced while waiting for the lock must not fire.
            if threading.current_thread() is not self._timer:
                return
            self._timer = None
            self._tick_locked()
            self._schedule()

    def tick_once(self) -> bool:
        """Run a single tick synchronously; returns False if it did not run."""
        with self.lock:
            return self._tick_locked()

    def _tick_locked(self) -> bool:
        try:
            result = self.engine.step()
        except Exception as e:
            self.tick_errors += 1
            logger.error(f"Simulation tick failed at tick {self.engine.state.tick_count}: {e}", exc_info=True)
            return False
        if result is None:
            return False
        state = result.state
        self.event_log.prune(state.time_ms)
        self.stats_history.maybe_record(state)
        return True

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _cmd_place_organism(self, data: Dict[str, Any]) -> Dict[str, Any]:
        cmd = PlaceOrganismCommand.model_validate(data)
        placed = self.engine.place_organism(cmd.type, Position(cmd.position.x, cmd.position.y))
        return self._ok(placed=placed)

    def _cmd_remove_organism(self, data: Dict[str, Any]) -> Dict[str, Any]:
        cmd = RemoveOrganismCommand.model_validate(data)
        self.engine.remove_organism(cmd.id)
        return self._ok()

    def _cmd_set_water_level(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.engine.set_water_level(LevelCommand.model_validate(data).level)
        return self._ok()

    def _cmd_set_sunlight_level(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.engine.set_sunlight_level(LevelCommand.model_validate(data).level)
        return self._ok()

    def _cmd_set_simulation_speed(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.engine.set_simulation_speed(SpeedCommand.model_validate(data).speed)
        self._schedule()
        return self._ok()

    def _cmd_toggle_pause(self, data: Dict[str, Any]) -> Dict[str, Any]:
        paused = self.engine.toggle_pause()
        self._schedule()
        return self._ok(paused=paused)

    def _cmd_pause(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if not self.engine.paused:
            self.engine.toggle_pause()
        self._schedule()
        return self._ok(paused=True)

    def _cmd_resume(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if self.engine.paused:
            self.engine.toggle_pause()
        self._schedule()
        return self._ok(paused=False)

    def _cmd_force_season(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.engine.force_season(SeasonCommand.model_validate(data).season)
        return self._ok()

    def _cmd_set_season_length(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.engine.set_season_length(SeasonLengthCommand.model_validate(data).milliseconds)
        return self._ok()

    def _cmd_set_biome_type(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.engine.set_biome_type(BiomeCommand.model_validate(data).biome_type)
        return self._ok()

    def _cmd_reset(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.engine.reset()
        self.event_log.clear()
        self.stats_history.clear()
        self._schedule()
        return self._ok()

    def handle_command(self, command: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Handle a command from the client.

        Args:
            command: Command name (e.g. 'place_organism', 'toggle_pause')
            data: Optional command payload

        Returns:
            Response dict; ``success`` is False for unknown commands and
            invalid payloads.
        """
        handlers: Dict[str, Callable[[Dict[str, Any]], Dict[str, Any]]] = {
            "place_organism": self._cmd_place_organism,
            "remove_organism": self._cmd_remove_organism,
            "set_water_level": self._cmd_set_water_level,
            "set_sunlight_level": self._cmd_set_sunlight_level,
            "set_simulation_speed": self._cmd_set_simulation_speed,
            "toggle_pause": self._cmd_toggle_pause,
            "pause": self._cmd_pause,
            "resume": self._cmd_resume,
            "force_season": self._cmd_force_season,
            "set_season_length": self._cmd_set_season_length,
            "set_biome_type": self._cmd_set_biome_type,
            "reset": self._cmd_reset,
        }

        with self.lock:
            handler = handlers.get(command)
            if handler is None:
                logger.warning(f"Unknown command received: {command}")
                return self._create_error_response(f"Unknown command: {command}")
            try:
                return handler(data or {})
            except ValidationError as e:
                logger.warning(f"Invalid payload for {command}: {e.error_count()} error(s)")
                return self._create_error_response(f"Invalid payload for {command}: {e.errors()[0]['msg']}")
            except EcosimError as e:
                logger.warning(f"Command {command} rejected: {e}")
                return self._create_error_response(str(e))

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def get_state(self) -> StatePayload:
        with self.lock:
            return StatePayload.from_snapshot(
                self.engine.snapshot(),
                event_log=self.event_log,
                stats=StatsPayload.from_engine_stats(self.engine.get_stats()),
            )

    def serialize_state(self) -> str:
        return self.get_state().to_json()
