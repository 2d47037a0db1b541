"""Task list manager with a guarded in-memory list and a durable key-value slot."""
