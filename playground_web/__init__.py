"""Browser client for the API Playground backend."""
