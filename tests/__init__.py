"""Tests for PokeSim."""
