"""
Catalogue modules live under this package.

Each module owns its models, service functions and JSON routes, and reuses the
platform primitives (DB session, auth, audit, error wrapping).
"""
