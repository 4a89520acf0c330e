# Services package init
"""
Library API Backend — Services Layer
=====================================

What:  Business logic layer sitting between routes (HTTP) and repositories
       (persistence).
How:   Services receive a repository, apply not-found and error-containment
       rules, and return response models. Routes get them through FastAPI's
       dependency injection.

Service Inventory:
    - BookService: add, list, fetch, delete and availability updates
"""
