"""Runtime support: configuration, application context and logging."""
