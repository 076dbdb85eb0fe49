"""Core domain model: value objects, entities, errors."""
