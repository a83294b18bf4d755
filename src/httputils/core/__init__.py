"""Core request models, executor and client."""
