"""Test doubles for the labyrinth engine."""
