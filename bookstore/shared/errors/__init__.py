"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that tagged service errors
are consistently translated into API responses.
"""
