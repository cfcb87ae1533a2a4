"""Hostel management API."""
