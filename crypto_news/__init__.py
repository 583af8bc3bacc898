"""Crypto news dashboard package."""
