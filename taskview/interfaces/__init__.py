"""Interfaces layer for taskview (command line)."""
