"""core.contracts

Stable interfaces (ABCs) shared between features.

Features depend on contracts, not on concrete implementations from other
features. This package contains only interfaces and shared type definitions.
"""
