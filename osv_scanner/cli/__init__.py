"""Command-line interface for osv-scanner."""
