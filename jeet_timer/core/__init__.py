"""
Core utilities — exceptions and cross-cutting concerns shared by the
ingestion, analytics, and API server layers.
"""
