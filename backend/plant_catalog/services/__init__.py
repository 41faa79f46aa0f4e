# Services package init
"""
Plant Catalog Backend - Services Layer
=======================================

What:  Everything between the routes (HTTP) and the database.

Service Inventory:
    - PlantStore:   Record store adapter over the `plants` table
    - PlantService: One request handler per CRUD verb
    - seed:         Baseline plant list and the startup loader

Why services are separate from routes:
    Handlers can be unit-tested against a mocked store without HTTP overhead.
"""
