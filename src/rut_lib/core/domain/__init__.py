"""Modelos y entidades del dominio.

Por qué:
- Aquí viven el algoritmo módulo 11, el parser y el value object `Rut`.
- El dominio no conoce CLI, archivos ni configuración: solo conceptos del problema.
"""
