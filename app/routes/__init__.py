"""
Routes package for the local Animals API.

This package contains route blueprints:
- api: REST endpoints for the animals collection
"""
