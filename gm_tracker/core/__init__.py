"""Core domain logic: exceptions, field mapping and the AI assistant."""
