"""
Lumania plugin utilities.

This package contains the persistence and configuration helpers used by the
plugin host, organized into subpackages:

- storage/: YAML-backed hierarchical config store with typed accessors
- serialization/: Location and ItemStack models and their store codecs
- database/: Connection pool factory and SQL setup script runner
"""
