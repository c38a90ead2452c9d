"""
Version 1 of the API.

Breaking changes to the vehicle representation should be introduced
in a new version subpackage (e.g. ``v2``).
"""
