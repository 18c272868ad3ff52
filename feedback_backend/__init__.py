"""Feedback session service backend."""
