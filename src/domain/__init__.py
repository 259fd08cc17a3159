"""Domain layer - Order aggregate, value objects, events and repository contracts."""
