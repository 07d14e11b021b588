"""
VitalNexus health monitoring backend.

Doctor / user / article records, simulated wearable telemetry and a
rule-based specialist recommender.
"""
__version__ = "1.0.0"
