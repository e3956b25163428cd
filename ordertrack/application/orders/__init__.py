"""Order application services."""
