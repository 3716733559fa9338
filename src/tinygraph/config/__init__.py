"""Configuration — models, settings, and logging setup."""
