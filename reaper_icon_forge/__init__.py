"""
REAPER Icon Forge - toolbar sprite sheet and track icon generator.
"""

__version__ = "1.0.0"
