# Routes package init
"""
Plant Catalog Backend - API Routes Package
===========================================

Route Inventory:
    - plants.py:   POST   /plants
                   GET    /plants/{name}
                   PATCH  /plants/{name}
                   DELETE /plants/{name}
    - landing.py:  GET    /                (static landing page)
    - health.py:   GET    /health          (service health check)

Design Principle:
    Routes are THIN: pull the name/body out of the request, call PlantService,
    return the record. Failures are raised, never formatted here.
"""
