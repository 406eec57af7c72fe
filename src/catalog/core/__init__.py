"""Core product mapping components."""
