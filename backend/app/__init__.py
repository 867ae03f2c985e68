"""
FastAPI application and request-scoped services.
"""
