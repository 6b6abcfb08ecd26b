"""
UI layer: the wiring framework and the built-in components.
"""
