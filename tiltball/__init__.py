"""
Tilt Ball
=========

Single-screen arcade game: keep a bouncing ball alive with a triangle
paddle, knock it into a sliding basket for bonus points, and let device
tilt nudge it once it is in the air.

All tunable parameters are in game_config.yaml.
"""

__version__ = "0.1.0"
