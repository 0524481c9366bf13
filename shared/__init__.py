"""Shared building blocks for the provider tool servers."""
