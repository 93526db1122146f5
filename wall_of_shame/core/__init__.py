"""Core domain types shared across layers."""
