# gwregistry/core/__init__.py
