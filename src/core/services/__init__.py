"""Application services (workflows orchestrating adapters)."""
