"""Core shared models for xcard_toolkit."""
