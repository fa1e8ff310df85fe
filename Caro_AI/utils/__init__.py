"""CLI, logging, and timing helpers."""
