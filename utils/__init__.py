"""
utils/ - Shared Helpers
=======================
Logging setup and naming conventions used by every other layer.
"""
