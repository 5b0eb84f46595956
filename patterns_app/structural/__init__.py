"""Structural patterns: Adapter, Decorator, Facade."""
