"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos
  (relojes del sistema, terminal, ejecutor de comandos).
- Permite invertir dependencias: el Core depende de abstracciones y los
  tests sustituyen la terminal y el reloj por fakes.
"""
