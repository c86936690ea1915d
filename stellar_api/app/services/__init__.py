"""
Service layer abstraction.

Each service encapsulates the lookups for one part of the catalog.
Handlers call the services rather than touching the catalog tuples
directly, so the data source can change without touching the routes.
"""
