"""
Domain Layer - Application records, their invariants and repository ports.

This layer has no dependency on FastAPI, SQLAlchemy or any transport.
"""
