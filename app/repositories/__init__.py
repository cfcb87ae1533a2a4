"""Async data-access repositories."""
