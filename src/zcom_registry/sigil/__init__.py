"""Credential and wallet lookup."""
