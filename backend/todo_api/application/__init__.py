"""
Application Layer
=================

Use cases orchestrating one request each: load entities through repository
ports, apply entity and domain-service logic, persist, return a result.
No framework imports live here.
"""
