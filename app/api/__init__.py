"""
API layer for DevConnect.

Exposes the HTTP endpoints under /api/v1 (auth, profile, posts) plus the
/health probe.
"""
