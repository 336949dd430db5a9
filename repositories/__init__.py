"""
repositories/ - Data Access Layer
==================================
SQL lives here and nowhere else. ProjectRepository owns the project
aggregate: it runs one transaction per call and hands back model dataclasses.
"""
