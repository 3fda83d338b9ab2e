"""Demos de patrones creacionales.

Por qué un paquete:
- Agrupa una demo por patrón; ninguna depende de otra.
- Cada demo expone `run(argument, value, output)` para la tabla de dispatch.
"""

from creational_demos.demos import abstract_factory, builder, factory_method

__all__ = [
    "abstract_factory",
    "builder",
    "factory_method",
]
