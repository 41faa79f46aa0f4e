# Middleware package init
"""
Plant Catalog Backend - Middleware Package
===========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → Route Handler

    Request ID runs first so the access log line (and any error logged by the
    boundary handler) carries the same correlation ID.
"""
