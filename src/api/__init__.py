"""API layer - controllers."""
