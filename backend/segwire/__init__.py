"""Segwire: Segment analytics for FastAPI applications."""
