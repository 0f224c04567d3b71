"""
DevConnect Backend Application: root package.

This package contains the FastAPI app entry point (main.py), API routes,
the profile and post use cases, domain models and MongoDB repositories.
"""
