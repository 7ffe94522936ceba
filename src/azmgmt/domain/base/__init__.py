"""Domain base layer - exceptions and ports shared across the client."""
