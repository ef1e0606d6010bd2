"""Command line interface for ym5view."""
