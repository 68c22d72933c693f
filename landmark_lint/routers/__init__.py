"""
Routers module - API endpoint handlers organized by feature.

- landmarks: Structural landmark audit of HTML documents
"""
