# gwregistry/web/routes/api/__init__.py
"""
REST API routers
"""
