"""
Configuration module.

Frozen default parameters, YAML-backed overrides and validation.
"""
