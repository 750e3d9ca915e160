"""CLI (Typer + Rich). Solo presentación: la lógica vive en `rut_lib.core`."""
