"""Ecosim exception hierarchy.

Centralised base classes so callers can catch simulation failures narrowly.
Expected domain outcomes (rejected placements, unknown species) are not
exceptions; they are reported through return values.
"""


class EcosimError(Exception):
    """Root of all ecosim domain exceptions."""


class SimulationError(EcosimError):
    """Errors during simulation execution (engine, phases, organisms)."""


class ConfigurationError(EcosimError):
    """Invalid or missing configuration."""


class CommandError(EcosimError):
    """A command sent to the simulation could not be applied."""
