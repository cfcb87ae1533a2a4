# app/services/common/__init__.py
"""
Shared service-layer infrastructure.

- **errors**: Service-layer exception hierarchy
- **security**: Password hashing (bcrypt) and JWT token management
- **permissions**: Principal, route guards and the resource scoping policy
- **workflow**: Status transitions shared by complaints and suggestions
"""
from __future__ import annotations

from . import errors, permissions, security, workflow

__all__ = ["errors", "permissions", "security", "workflow"]
