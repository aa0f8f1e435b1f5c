"""Command line interface for plotparse."""
