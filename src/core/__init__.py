"""
Core domain models, mathematical primitives, and output contracts.

This module contains the building blocks that are independent of
standard input/output handling.
"""
