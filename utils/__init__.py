"""
utils/ - Shared Helpers
=======================
Logging configuration used by every layer.
"""
