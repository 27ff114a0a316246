"""Image tools and image actions."""
