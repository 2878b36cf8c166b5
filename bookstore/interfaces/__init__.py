"""HTTP interface: FastAPI routers, schemas and dependency wiring."""
