"""
connect4_engine - Connect Four rules engine

This package provides the board model, move adjudication, win and tie
detection, and a Gymnasium environment wrapper for Connect Four.
Drawing the board and collecting input is left to the caller.
"""

# Version number
__version__ = '0.1.0'
