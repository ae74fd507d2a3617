"""Core address book services: errors, in-memory model and storage."""
