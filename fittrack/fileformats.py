# -*- coding: utf-8 -*-
"""JSON, XML and YAML documents shared by plan and analysis transfer.

A document is a plain dict. In XML each list is a container element whose
entries use the tag given by ``list_tags``; leaves keep their text verbatim.
"""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import PurePath
from urllib.parse import quote
from typing import Any, Callable, Dict, Mapping, Optional

import yaml

from .errors import UnsupportedFormatError

EXPORT_FORMATS = ("json", "xml", "yaml")

_EXTENSIONS = {
    "json": "json",
    "xml": "xml",
    "yaml": "yaml",
    "yml": "yaml",
}

MEDIA_TYPES = {
    "json": "application/json",
    "xml": "application/xml",
    "yaml": "application/x-yaml",
}

# Key under which load_document keeps the XML root tag.
ROOT_KEY = "@root"

_UNSAFE_FILENAME_RE = re.compile(r"[^\w.-]+", re.UNICODE)


@dataclass(frozen=True)
class ExportedFile:
    filename: str
    media_type: str
    content: bytes


def detect_format(filename: Optional[str]) -> str:
    suffix = PurePath(filename or "").suffix.lower().lstrip(".")
    fmt = _EXTENSIONS.get(suffix)
    if fmt is None:
        raise UnsupportedFormatError(suffix or None)
    return fmt


def check_format(fmt: Optional[str]) -> str:
    fmt = (fmt or "").strip().lower()
    fmt = _EXTENSIONS.get(fmt, "")
    if fmt not in EXPORT_FORMATS:
        raise UnsupportedFormatError(fmt or None)
    return fmt


def filename_slug(name: str, fallback: str) -> str:
    slug = "-".join(name.split())
    return _UNSAFE_FILENAME_RE.sub("", slug) or fallback


def content_disposition(filename: str) -> str:
    """Attachment header value; non-ASCII names go in ``filename*`` (RFC 5987)."""
    ascii_name = filename.encode("ascii", "ignore").decode("ascii")
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"


# ---- XML ----


def _xml_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _fill_element(element: ET.Element, data: Mapping[str, Any], list_tags: Mapping[str, str]) -> None:
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, list):
            container = ET.SubElement(element, key)
            entry_tag = list_tags.get(key, "entry")
            for entry in value:
                child = ET.SubElement(container, entry_tag)
                if isinstance(entry, dict):
                    _fill_element(child, entry, list_tags)
                else:
                    child.text = _xml_text(entry)
        elif isinstance(value, dict):
            _fill_element(ET.SubElement(element, key), value, list_tags)
        else:
            ET.SubElement(element, key).text = _xml_text(value)


def to_xml(document: Mapping[str, Any], root_tag: str, list_tags: Mapping[str, str]) -> bytes:
    root = ET.Element(root_tag)
    _fill_element(root, document, list_tags)
    ET.indent(root)
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def _read_element(element: ET.Element, list_tags: Mapping[str, str]) -> Any:
    children = list(element)
    if element.tag in list_tags:
        return [_read_element(child, list_tags) for child in children]
    if not children:
        return element.text or ""
    return {child.tag: _read_element(child, list_tags) for child in children}


def read_children(root: ET.Element, list_tags: Mapping[str, str]) -> Dict[str, Any]:
    return {child.tag: _read_element(child, list_tags) for child in root}


# ---- Whole documents ----


def dump_document(document: Mapping[str, Any], fmt: str, root_tag: str, list_tags: Mapping[str, str]) -> bytes:
    if fmt == "json":
        return json.dumps(document, ensure_ascii=False, indent=2).encode("utf-8")
    if fmt == "yaml":
        return yaml.safe_dump(dict(document), allow_unicode=True, sort_keys=False).encode("utf-8")
    return to_xml(document, root_tag, list_tags)


def load_document(
    content: bytes,
    fmt: str,
    list_tags: Mapping[str, str],
    fail: Callable[[str], Exception],
) -> Dict[str, Any]:
    """Decode ``content`` into a dict; problems are raised as ``fail(reason)``.

    For XML the root tag is kept under ``ROOT_KEY``.
    """
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise fail("file is not valid UTF-8") from exc

    try:
        if fmt == "json":
            data = json.loads(text)
        elif fmt == "yaml":
            data = yaml.safe_load(text)
        else:
            root = ET.fromstring(text)
            data = read_children(root, list_tags)
            data[ROOT_KEY] = root.tag
    except (ValueError, yaml.YAMLError, ET.ParseError) as exc:
        raise fail(str(exc)) from exc

    if not isinstance(data, dict):
        raise fail("expected a document")
    return data
