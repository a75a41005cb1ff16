"""Command-line interface for the peer council."""
