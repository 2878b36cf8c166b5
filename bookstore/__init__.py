"""
Bookstore: CRUD REST backend for books and users.

Application package root, laid out as hexagonal architecture
(ports & adapters):

Layers:
    - domain: Entities, ports (ABCs), errors.
    - application: Services, DTOs, orchestration.
    - infrastructure: Adapters (PostgreSQL, bcrypt) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, security, logging).
    - core: Settings and the application context.
"""
