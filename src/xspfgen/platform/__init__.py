"""Infrastructure shared by all feature layers."""
