"""Blot hashing engine: digest primitives, canonicalizer and envelope codec."""
