"""Core domain logic: exceptions, privileges, question details, sanitization."""
