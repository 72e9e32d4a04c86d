"""Native functions registered in the root environment."""
