"""
PyGame graphical interface for Crazy Pong
"""
