"""HTTP API for the GM console."""
