"""Progress application module: dashboard reporting over loaded plans."""
