"""Domain layer — categories, error taxonomy, and the validation rules.

This layer depends only on stdlib.
It must never import from services or config.
"""
