"""
Dash adapter: app factory, layout builders, rendering functions and callbacks.
"""
