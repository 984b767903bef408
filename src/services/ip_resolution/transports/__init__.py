"""
Transport implementations for the IP resolution service.

Supports:
- HTTP/REST (FastAPI)
- Console (rich)
"""
