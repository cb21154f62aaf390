"""Configuration, logging and shared exception types."""
