"""
db/ - Database Layer
====================
Handles PostgreSQL connections, schema initialization, the error taxonomy,
and the row codec that maps between SQL rows and domain dataclasses.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
