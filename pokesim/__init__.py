"""PokeSim - a small creature battle simulator with an HTTP API."""

__version__ = "0.1.0"
