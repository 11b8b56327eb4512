"""Workflows package."""
