"""Adaptadores de salida (archivos).

El Core no sabe de disco; estos módulos traducen sus modelos a formatos externos.
"""
