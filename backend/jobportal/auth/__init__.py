# jobportal/auth/__init__.py
"""
Authentication modules for the job portal.

This package contains:
- claims.py: Verified token claims attached to each authenticated request
"""
from jobportal.auth.claims import Claims

__all__ = ["Claims"]
