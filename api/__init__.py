"""API layer for the catalog import pipeline.

Use cases and the command line entry point.

Rules:
- MAY import every other layer
- MUST NOT implement extraction, classification or persistence directly
"""
