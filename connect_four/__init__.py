"""
connect_four - Rules engine and round management for two-player Connect Four

This package models the 6x7 board, the turn protocol, win detection against
the catalog of winning lines and the lifecycle of rounds within a session.
Rendering is left to whichever interface drives the engine.
"""

# Version number
__version__ = '0.1.0'
