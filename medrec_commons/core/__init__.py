"""Core utilities and shared application primitives.

Configuration, the typed error taxonomy and its HTTP translation, field
validation, and small reusable helpers shared by every service that mounts
this package.
"""
