"""
TuneBridge: a music player whose playback backend can be swapped at runtime
"""

__version__ = "0.1"
