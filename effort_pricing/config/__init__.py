"""Estimation configuration schemas and loading."""
