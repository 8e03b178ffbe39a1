"""
Puzzle Box: build small puzzles that guard a secret and export each one as
a standalone HTML page that plays offline.
"""

__version__ = "0.1.0"
