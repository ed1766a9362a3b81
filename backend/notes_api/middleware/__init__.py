# Middleware package init
"""
Notes API - Middleware Package
================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (request direction):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the access log line and any error handler
    can include it; the response passes back through in reverse order.
"""
