# Middleware package init
"""
Blog API - Middleware Package
===============================

Middleware Chain:
    Request → [Request ID] → [Logging] → Route Handler

    Request ID runs first so the access log line and any error response
    carry the same correlation ID.
"""
