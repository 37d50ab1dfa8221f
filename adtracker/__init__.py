"""
AdTracker - ad campaign and revenue tracking API.
"""

__version__ = "1.0.0"
