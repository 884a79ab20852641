"""
Test suite for storefront

Contains:
- tests/unit/          : Unit tests for individual modules
"""
