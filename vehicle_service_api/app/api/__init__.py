"""
API package containing versioned routes and their dependencies.

A version subpackage (``v1``) exposes a top‑level ``router`` which
includes all of its domain‑specific endpoints.
"""
