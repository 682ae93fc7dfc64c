"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/          → Data persistence interfaces
- credential_verifier.py → Password hashing and token signing
"""

from konektz.domain.ports.credential_verifier import CredentialVerifier, TokenClaims

__all__ = [
    "CredentialVerifier",
    "TokenClaims",
]
