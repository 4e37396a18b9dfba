"""Command-line interface for the Reaper client."""
