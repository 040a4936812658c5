"""Shared utilities: telemetry and cross-cutting helpers. No business logic."""
