# Middleware package init
"""
Board Gateway - Middleware Package
===================================

Middleware Chain (order matters!):
    Request → [CORS] → [Security Headers] → [Request ID] → [Logging] → Route Handler

    1. CORS: Applied by FastAPI's CORSMiddleware (handles preflight)
    2. Security Headers: Add hardening headers to the response
    3. Request ID: Generate correlation ID for logging and error bodies;
       turns unhandled exceptions into the uniform 500 body
    4. Logging: Log method, path, status and duration with the request ID
"""
