"""
TODO API: user registration/authentication and per-user TODO management.
"""
