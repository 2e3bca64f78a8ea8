"""Organism entity and constructors."""

from ecosim.entities.organism import Organism, create_organism

__all__ = ["Organism", "create_organism"]
