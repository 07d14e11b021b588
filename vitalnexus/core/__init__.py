"""Core decision logic, free of storage and HTTP concerns."""
