# blog_api/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Startup checks and default admin creation
- db: Database configuration and connection management
- errors: Error taxonomy rendered by the API exception handlers
- ids: Parsing of client-supplied record ids
- policy: Caller identity and the owner-or-admin authorization rule
- security: Password hashing and JWT access tokens
"""
