"""Grade computation backend."""
