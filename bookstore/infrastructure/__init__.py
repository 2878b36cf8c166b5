"""
Infrastructure adapters for the bookstore.

Each adapter implements a domain port (ABC) and connects
to an external system: PostgreSQL or the bcrypt hashing library.
"""
