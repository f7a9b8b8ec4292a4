"""
Crazy Pong: a bouncing ball, two paddles moving together, and a speed ramp
"""

__version__ = "0.1.0"
