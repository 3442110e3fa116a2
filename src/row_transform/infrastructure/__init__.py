"""Infrastructure layer: transformation engine and data-frame steps."""
