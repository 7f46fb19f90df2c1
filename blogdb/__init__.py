"""
blogdb: scripts that create users and list them with their posts and profiles.
"""

__version__ = "0.1.0"
