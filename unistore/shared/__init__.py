"""Shared cross-cutting helpers. No storage logic."""
