"""
Patterns App - Runnable Catalogue of Object-Oriented Design Patterns

Each pattern (Observer, Strategy, Factory, Abstract Factory, Builder,
Singleton, Decorator, Facade, Adapter) is a small self-contained example
that wires a client to an abstraction and prints what happens to a console.
"""

__version__ = "0.1.0"
__author__ = "Patterns App Team"
