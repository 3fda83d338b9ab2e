"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2) y los enums cerrados.
- El dominio no conoce la CLI ni la consola: solo conceptos del problema.
"""
