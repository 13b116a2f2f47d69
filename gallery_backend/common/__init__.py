"""
PATH: common/__init__.py

Shared, framework-light helpers used by every storefront app:
formatting, validation, identifiers, money, pagination, error envelope.
"""
