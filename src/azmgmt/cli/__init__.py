"""Command-line interface for azmgmt."""
