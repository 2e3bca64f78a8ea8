"""Configuration package for the ecosystem simulation.

Tunables are grouped by concern:

- ecosystem: population caps, interaction radii, biome health scoring
- organisms: species catalogue (roles, native biomes, speeds)
- seasons: seasonal modifiers and cycle length
- simulation_config: dataclasses bundling the above for an engine instance
"""
