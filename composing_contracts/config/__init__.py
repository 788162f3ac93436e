"""
Configuration module.

Frozen default parameters, a YAML-backed loader with layered precedence, and
validation of merged settings.
"""
