# Routes package init
"""
Board Gateway - API Routes Package
===================================

Route Inventory (all JSON):
    - users.py:              /v1/users/...             (CRUD, max 10 rows)
    - content.py:            /v1/content/...           (CRUD, max 5 rows)
    - announcements.py:      /v1/announcements/...     (CRUD, max 5 rows, expired flag)
    - registered_emails.py:  /v1/registered-emails/... (CRUD, max 60 rows)
    - auth.py:               POST /v1/auth/login
    - health.py:             GET  /health

Routes are thin: they unpack the request, call a service, and return its
result. Status codes for failures come from the global exception handlers.
"""
