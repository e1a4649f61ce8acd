"""
Domain layer for verification email business logic.

This layer contains:
- Data models (registration, outbound email, handler result, settings)
- Business logic (parse, render, send, map outcome)
"""
