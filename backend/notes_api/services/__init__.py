# Services package init
"""
Notes API - Services Layer
============================

What:  Business rules between the routes (HTTP) and the store (memory).
How:   Services receive their store through FastAPI dependency injection
       (`get_note_service`), so each application instance and each test
       works against its own table.

Service Inventory:
    - NoteService: Payload validation, existence checks, typed errors
"""
