"""Service-level routes (health, banner)."""
