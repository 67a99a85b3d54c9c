"""Infrastructure Layer.

Persistence of layouts and service wiring.
"""
