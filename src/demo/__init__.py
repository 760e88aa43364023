"""
Demonstration driver for the Strassen multiplier.

Builds sample matrices (or reads a pair from JSON), multiplies them and
prints operands and product to the console.
"""
