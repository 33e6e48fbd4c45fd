"""Core resolution logic: models, interfaces, classification, resolver."""
