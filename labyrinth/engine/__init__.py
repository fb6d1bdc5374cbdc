"""Labyrinth engine components.

- parser: Command splitting and direction parsing
- catalog / validator: YAML room catalogs and their consistency checks
- turn: Turn generation from a room catalog
- state: The game state machine
- interpreter: Verb dispatch for player commands
- presenter / session: Turn descriptions and the session driver

Import directly from submodules:
    from labyrinth.engine.session import LabyrinthSession
    from labyrinth.engine.interpreter import CommandInterpreter
"""
