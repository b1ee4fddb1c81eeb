# gwregistry/web/routes/__init__.py
