"""Codec XML -> modelos tipados.

Por qué un adaptador:
- El parseo de XML (ElementTree) es un detalle del formato de transporte; el
  dominio solo ve datos planos validados por Pydantic.
- Un único punto que traduce cualquier fallo (XML roto, raíz inesperada,
  validación) a `XmlDecodeError` con un diagnóstico legible.
"""

from __future__ import annotations

from typing import Any, TypeVar
from xml.etree import ElementTree as ET

from pydantic import ValidationError

from core.domain.xml_model import XmlModel

T = TypeVar("T")


class XmlDecodeError(ValueError):
    """The body could not be decoded into the requested type."""


def parse_xml(body: str) -> ET.Element:
    try:
        return ET.fromstring(body)
    except ET.ParseError as exc:
        raise XmlDecodeError(f"malformed XML: {exc}") from exc


def element_to_data(element: ET.Element) -> Any:
    """Convierte un elemento en datos planos.

    - Atributos -> claves.
    - Hijos agrupados por tag; un tag repetido -> lista.
    - Texto -> clave `text` (o el valor directo si es una hoja sin atributos).
    """

    children = list(element)
    text = (element.text or "").strip()
    if not children and not element.attrib:
        return text

    data: dict[str, Any] = dict(element.attrib)
    grouped: dict[str, list[Any]] = {}
    for child in children:
        grouped.setdefault(child.tag, []).append(element_to_data(child))
    for tag, values in grouped.items():
        data[tag] = values if len(values) > 1 else values[0]
    if text:
        data.setdefault("text", text)
    return data


def decode_as(body: str, target: type[T]) -> T:
    """Decodifica `body` como `target` (`str` o subclase de `XmlModel`)."""

    if target is str:
        return body  # type: ignore[return-value]

    if not (isinstance(target, type) and issubclass(target, XmlModel)):
        raise TypeError(f"unsupported decode target: {target!r}")

    root = parse_xml(body)
    expected = target.xml_tag
    if expected is not None and root.tag != expected:
        raise XmlDecodeError(f"expected <{expected}> root for {target.__name__}, got <{root.tag}>")

    try:
        return target.model_validate(element_to_data(root))  # type: ignore[return-value]
    except ValidationError as exc:
        raise XmlDecodeError(f"invalid {target.__name__} document: {exc}") from exc
