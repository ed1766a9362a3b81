# Routes package init
"""
Notes API - API Routes Package
================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notes.py:   GET/POST  /api/notes
                  GET/PUT/DELETE /api/notes/{id}
    - health.py:  GET /health

Routes stay thin: extract the request data, call the service, wrap the
result. Validation and existence rules live in NoteService.
"""
