"""
Config Storage

This module contains the hierarchical config store:
- Document tree with dot-delimited path addressing
- Value kinds and their coercion rules for typed getters
- ConfigStore binding a document to a YAML file in the data folder
"""
