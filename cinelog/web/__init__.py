"""
Server-rendered web layer: routes, request context, and templates.
"""
