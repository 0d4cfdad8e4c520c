"""Modelos y errores del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce terminales, subprocesos ni CLI: solo conceptos del
  problema (deadline, desglose, resultado de ejecución).
"""
