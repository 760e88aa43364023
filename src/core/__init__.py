"""
Core domain model, matrix primitives, and the Strassen multiplier.

This module contains the building blocks that are independent of any
external representation (files, console output, etc.).
"""
