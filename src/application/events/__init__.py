"""Application event handlers."""
