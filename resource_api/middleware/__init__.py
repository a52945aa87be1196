"""
Resource API - Middleware Package
===================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → [Unhandled Error] → Route Handler

    1. Request ID:      correlation id stored in a ContextVar, echoed in X-Request-ID
    2. Logging:         method, path, status and duration of every request
    3. CORS:            FastAPI's CORSMiddleware (handles preflight)
    4. Unhandled Error: last-resort JSON 500, inside CORS so browsers can read it
"""
