# Routes package init
"""
Blog API - Routes Package
===========================

Route Inventory:
    - health.py:  GET /, GET /health
    - blogs.py:   /blogs CRUD and vote endpoints

Routes are thin: they read path params and bodies, call a service, and
return its response model. Business rules live in services.
"""
