"""
Generators — render extraction results into source files.

Each generator module exposes a ``generate_*()`` function that returns
a ``GeneratedFile``.
"""
