"""User interfaces built on top of the core pipeline."""
