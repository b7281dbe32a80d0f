"""Core types and conversions."""
