"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works against
a store interface, so the persistence backend can be swapped without
changing API handlers.
"""
