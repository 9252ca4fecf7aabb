"""Core of capsule-cli: configuration, domain, interfaces and services."""

__version__ = "1.0"
