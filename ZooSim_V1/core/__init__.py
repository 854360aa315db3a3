"""
Core engine: the zoo state, its player commands, the daily tick and the
top-level game loop.
"""
