"""Infrastructure layer — reading values and rules from files.

This layer depends on stdlib and third-party parsers (ruamel.yaml).
It must never import from services, commands, or output.
"""
