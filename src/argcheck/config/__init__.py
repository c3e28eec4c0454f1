"""Configuration layer: env-var settings and logging setup."""
