# Routes package init
"""
Library API Backend — API Routes Package
=========================================

Route Inventory:
    - books.py:   POST   /books
                  GET    /books
                  GET    /books/{id}
                  DELETE /books/{id}
                  PATCH  /books/{id}/availability
    - health.py:  GET    /health

Routes stay thin: read the request, call BookService, pick the status code.
"""
