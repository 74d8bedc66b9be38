"""
models/ - Domain Entities
=========================
Plain dataclasses mirroring one row of each table.
"""
