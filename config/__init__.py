"""
Configuration: YAML defaults (base.yaml), loader, and typed schema.
"""
