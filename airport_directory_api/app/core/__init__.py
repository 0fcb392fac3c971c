"""Configuration, logging, error types and seed loading."""
