"""Shared infrastructure: settings, logging, database and exceptions."""
