"""Interactive shell around the wellness engines."""
