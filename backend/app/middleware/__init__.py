# Middleware package init
"""
Community Board Backend — Middleware Package
==============================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first: every later log line can read the correlation ID
    2. Logging: captures status and duration once the response comes back
    3. CORS: applied by FastAPI's CORSMiddleware (handles preflight)
"""
