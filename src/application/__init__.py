"""Application layer - commands, queries, integration event handling and settings."""
