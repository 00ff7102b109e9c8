"""Command implementations for the navgraph CLI."""
