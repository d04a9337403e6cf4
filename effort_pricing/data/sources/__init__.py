"""Concrete task providers."""
