"""
Generators — produce source text from reflected values.

Each generator module exposes a ``generate_*()`` function that returns
a ``GeneratedSource`` instance.
"""
