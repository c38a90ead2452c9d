"""
Pydantic schema definitions for API payloads.

Vehicle records, customer snapshots and the enriched vehicle view are
kept separate from the SQLite rows they are built from so the JSON
representation can evolve independently of storage.
"""
