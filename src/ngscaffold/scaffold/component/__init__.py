"""Static component templates."""
