"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2) y
  la taxonomía de errores de entrada.
- El dominio no conoce la CLI, los settings ni la terminal.
"""
