"""
Test suite for the Discord Game Muter.

- Unit tests for the game core (sessions, registry, gate, reactor, handlers)
- Unit tests for the discord.py layer with mocked Discord objects
- Architecture tests for imports, configuration and bot wiring
"""
