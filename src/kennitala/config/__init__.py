"""Configuration layer — settings models and logging setup.

Config may import from domain. It must never import from services.
"""
