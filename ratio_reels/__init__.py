"""
ratio-reels: compositor procedural de videos promocionales RATIO.
Cada composición describe un frame como función pura de su número.
"""

__version__ = "0.1.0"
