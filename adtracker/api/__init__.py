"""
HTTP API for AdTracker.
"""
