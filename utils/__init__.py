"""
utils/ - Shared helpers
=======================
Cross-cutting helpers used by every layer (currently logging only).
"""
