"""
Report building: per-address aggregation and report emission.
"""

__all__ = ["aggregator", "emitter"]
