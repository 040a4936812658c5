"""Podium: presentation lifecycle engine for community events."""
