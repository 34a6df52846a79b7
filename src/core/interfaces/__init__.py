"""Contratos que el Core espera de sus colaboradores.

Hoy solo el temporizador del backoff (`timer.Sleeper`), para poder sustituir
`asyncio.sleep` por un reloj controlado en tests.
"""
