"""Creational patterns: Factory, Abstract Factory, Builder, Singleton."""
