"""Template text resources for generated files."""
