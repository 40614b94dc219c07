"""Configuration loading for the content layer."""
