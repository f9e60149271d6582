"""Namespace-qualified translation resolution.

Subpackages:
- configuration: pydantic-settings based Settings
- logging: structlog setup
- i18n: key resolution, pluralization, interpolation and fallback handling
"""
