"""
db/ - Storage Layer
===================
Opens the storage location (SQLite file or PostgreSQL server), creates the
schema, and lends connections to the repositories one statement at a time.
This layer is the lowest in the architecture and depends only on models/.
"""
