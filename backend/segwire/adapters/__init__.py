"""Infrastructure adapters.

Each adapter wraps external infrastructure (the Segment SDK) behind a
protocol the analytics domain depends on.
"""
