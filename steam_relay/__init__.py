"""
Steam Relay — backend relay between a game client and the Steam partner API.
"""

__version__ = "1.0.0"
