"""
db/ - Database Layer
====================
Handles PostgreSQL connections and the `Database` handle that quotes values
and executes composed SELECT statements.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
