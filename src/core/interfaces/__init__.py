"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que cumplen modelos y servicios concretos.
- La CLI depende de estos contratos, no del ejecutor HTTP.
"""
