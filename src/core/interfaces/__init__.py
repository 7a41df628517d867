"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los conversores concretos.
- Los llamadores dependen de la forma de un conversor, no de una clase.
"""
