"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: the auth gate
- errors.py: exception handlers producing the uniform error body
"""
