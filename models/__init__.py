"""
models/ - Domain Layer
======================
Plain data objects and the error taxonomy shared by every layer.
These modules import nothing from the storage or service layers.
"""
