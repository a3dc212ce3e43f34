"""
Dino Run: a single-screen jump-over-the-cactus arcade game.
Split into a pure simulation core, a phase controller and a pygame host.
"""

__version__ = "1.0.0"
