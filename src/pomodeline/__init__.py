"""
A single-session work/break timer that renders its state as a status string.
"""

__version__ = "0.1.0"
