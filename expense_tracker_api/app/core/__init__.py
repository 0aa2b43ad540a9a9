"""Settings, logging and shared helpers used across the application."""
