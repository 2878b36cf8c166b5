"""
Shared module package.

Contains cross-cutting concerns:
- Error handling and mapping
- Access-token check
- Request logging
- Logging configuration
"""
