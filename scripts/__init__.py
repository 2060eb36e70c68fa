"""Command line helpers for the roster; importable as ``scripts.roster``."""
