"""Core: dominio, contratos, servicios y configuración.

La CLI y los adaptadores dependen de este paquete, nunca al revés.
"""
