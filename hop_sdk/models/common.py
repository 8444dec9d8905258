"""Shared aliases for Hop models."""

# Hop IDs are prefixed strings, e.g. "project_MzA0MDgwOTQ2MDEwMjQ3NzI"
Id = str

# ISO 8601 timestamp
Timestamp = str

# e.g. "512mb", "2gb"
ByteSizeString = str
