"""Integrations with external observability systems."""
