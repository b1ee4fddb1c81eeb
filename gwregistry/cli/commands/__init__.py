# gwregistry/cli/commands/__init__.py
