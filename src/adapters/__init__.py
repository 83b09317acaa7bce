"""Adapters connecting the core pipeline to files, JSON, and the console."""
