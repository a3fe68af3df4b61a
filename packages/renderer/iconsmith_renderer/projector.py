"""Multi-size presentation of one rendered document.

Layout runs once at the reference size; every presentation is a clone of the parsed
document with only its outer width and height replaced. The viewBox is kept, so all
presentations are uniform scales of the same geometry.
"""

from __future__ import annotations

import copy
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

from .markup import fmt


T = TypeVar("T")


@dataclass(frozen=True)
class Presentation(Generic[T]):
    target: T
    size: float
    markup: str


def parse_document(markup: str) -> ET.Element:
    return ET.fromstring(markup)


def scaled_clone(root: ET.Element, size: float) -> ET.Element:
    clone = copy.deepcopy(root)
    clone.set("width", fmt(size))
    clone.set("height", fmt(size))
    return clone


def project(markup: str, sizes: Iterable[float]) -> list[str]:
    root = parse_document(markup)
    return [ET.tostring(scaled_clone(root, size), encoding="unicode") for size in sizes]


def project_targets(markup: str, targets: Iterable[tuple[T, float]]) -> list[Presentation[T]]:
    root = parse_document(markup)
    return [
        Presentation(target=target, size=size, markup=ET.tostring(scaled_clone(root, size), encoding="unicode"))
        for target, size in targets
    ]
