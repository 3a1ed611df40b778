"""
HTTP layer: dependencies, templating, middleware and routes.
"""
