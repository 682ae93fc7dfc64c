"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Database implementations (SQLAlchemy repositories)
- security/: Password hashing and JWT signing (JwtCredentialVerifier)
"""
