"""
Service layer abstraction.

Each service encapsulates business logic for a domain so that API
handlers stay thin.
"""
