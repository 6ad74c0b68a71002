"""Domain layer — collections, string/array helpers, and the type/rule model.

This layer depends only on stdlib and email-validator.
It must never import from services, commands, output, or config.
"""
