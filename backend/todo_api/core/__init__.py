"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Application initialization and default admin creation
- db: Database configuration and connection management
- logging: Log level setup for the application loggers
- security: Password hashing and JWT token handling
"""
