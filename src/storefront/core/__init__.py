"""
Core domain models, pricing primitives, and validation helpers.

This module contains the building blocks that are independent of the
managers holding state.
"""
