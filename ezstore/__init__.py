"""Resolve Microsoft Store products into packages, bundles and framework dependencies."""

__version__ = "0.1.0"