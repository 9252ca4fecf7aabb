"""Adapters to the outside world: the Capsule HTTP API and local git."""
