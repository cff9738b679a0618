"""
Domain Layer
============

Core business rules for users and their TODO items.
This layer has no dependencies on FastAPI, Tortoise or any other framework.

Contains:
- models: User and Todo entities with their invariants
- repositories: abstract persistence contracts
- services: stateless helpers over loaded entities
- errors: typed failures raised to the application layer
"""
