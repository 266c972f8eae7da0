"""Config discovery core."""
