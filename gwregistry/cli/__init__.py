# gwregistry/cli/__init__.py
