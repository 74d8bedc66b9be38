"""
db/ - Database Layer
====================
Handles the PostgreSQL connection pool, schema initialization, the
unit-of-work used for multi-table writes, and the StoreError taxonomy.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
