"""Modelos y entidades del dominio.

Por qué:
- Aquí viven el catálogo de recursos, los elementos (Pydantic v2) y el
  resultado discriminado de una lectura.
- El dominio no conoce HTTP ni CLI: solo conceptos del problema.
"""
