"""
Database Utilities

This module contains utilities for database setup at plugin startup:
- Connection pool creation from stored credentials
- Bundled SQL script execution with per-statement isolation
"""
