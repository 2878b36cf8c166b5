"""Settings and the application context."""
