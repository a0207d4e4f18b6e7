"""
Services Package

- store.py: parameterized SQL statements shared by every resource
- rate_limiter.py: per-client rate limiting with slowapi
"""
