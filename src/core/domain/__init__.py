"""Dominio del XML API2 de BoardGameGeek.

Contiene:
- `requests`: descriptor de GET re-emitible y respuesta cruda de un intento.
- `xml_model`: base para validar documentos XML con Pydantic.
- `models`: colección, hot list, búsqueda y el sobre `<errors>` del API.

Nada aquí hace I/O; el transporte vive en `core.services` y `adapters`.
"""
