"""Labyrinth - turn engine for a text-driven labyrinth crawler minigame"""

__version__ = "0.1.0"
