"""
Domain layer for the bookstore.

Contains entities, port interfaces and errors.
No framework imports and no IO.
"""
