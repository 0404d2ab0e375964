"""Domain model and validation for roster students."""
