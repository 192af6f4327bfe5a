"""Configuration settings for the Lumania plugin utilities."""
