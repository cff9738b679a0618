"""
Infrastructure Layer
====================

Adapters implementing the domain contracts:
- db: Tortoise ORM repositories and the per-request transaction helper
- security: passlib/PyJWT backed PasswordEncoder and TokenIssuer
"""
