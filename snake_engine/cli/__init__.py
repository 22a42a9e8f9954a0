"""
Command-line tools for the snake engine.
"""
