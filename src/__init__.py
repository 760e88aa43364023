"""Strassen multiplier package root."""
