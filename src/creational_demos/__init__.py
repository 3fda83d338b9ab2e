"""Creational design pattern demos (Abstract Factory, Builder, Factory Method)."""

__version__ = "0.1.0"
