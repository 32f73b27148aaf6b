"""
db/ - Database Layer
====================
Handles PostgreSQL connections, the SQL statement catalog and schema initialization.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
