"""
Web application package for the Tower of Hanoi solver.

Provides a FastAPI-based REST API (POST /api/solve). Serve with
`uvicorn web.app:app`.
"""
