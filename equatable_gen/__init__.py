"""
equatable-gen — emit Swift ``Equatable`` conformances from live Python values.
"""

__version__ = "0.1.0"
