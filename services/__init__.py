"""
services/ - Business Logic Layer
================================
Services sit between callers and repositories. They turn repository
results (None / False) into explicit domain errors; they own no
transaction logic.
"""
