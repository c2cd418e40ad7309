"""Locate the repeating record element in an XML tree of unknown shape.

Sanctions publishers wrap their subjects very differently: OFAC puts
``sdnEntry`` elements straight under the root, the UN nests ``INDIVIDUAL`` and
``ENTITY`` elements inside per-kind containers, and some exports bury the
records several levels deep. Discovery tries three tiers in order and the
first one that finds a repeating composite element wins:

1. direct children of the root,
2. children of container elements one level down (all containers merged),
3. any descendant at any depth.

Each record element is then flattened into a field-map whose keys join the
local names along the path with ``_``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from sanctions_mapper.models import FieldMap

TIER_DIRECT = "direct"
TIER_CONTAINER = "container"
TIER_DEEP = "deep"
TIER_NONE = "none"


@dataclass(frozen=True)
class DiscoveryResult:
    """Record elements plus the candidate groups that lost the size contest."""

    elements: Tuple = ()
    tier: str = TIER_NONE
    record_tags: Tuple[str, ...] = ()
    discarded: Tuple[Tuple[str, int], ...] = ()

    def __bool__(self) -> bool:
        return bool(self.elements)


# ------------------------------------------------------------------
# Tree helpers
# ------------------------------------------------------------------
def local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def element_children(node) -> List:
    # lxml exposes comments and processing instructions as children with non-string tags.
    return [child for child in node if isinstance(child.tag, str)]


def has_element_children(node) -> bool:
    return any(isinstance(child.tag, str) for child in node)


def node_text(node) -> str:
    parts = [node.text or ""]
    parts.extend(child.tail or "" for child in node)
    return "".join(parts).strip()


def _group_by_name(nodes: Iterable) -> Dict[str, List]:
    groups: Dict[str, List] = {}
    for node in nodes:
        groups.setdefault(local_name(node.tag), []).append(node)
    return groups


def _largest_group(groups: Dict[str, List]) -> Tuple[Optional[str], List, List[Tuple[str, int]]]:
    """Pick the biggest qualifying group; earlier groups win ties."""

    qualifying = [(tag, members) for tag, members in groups.items() if len(members) > 1]
    if not qualifying:
        return None, [], []
    best_tag, best_members = max(qualifying, key=lambda item: len(item[1]))
    discarded = [(tag, len(members)) for tag, members in qualifying if tag != best_tag]
    return best_tag, best_members, discarded


def _repeating_children(node) -> Tuple[Optional[str], List, List[Tuple[str, int]]]:
    groups = _group_by_name(element_children(node))
    composite = {tag: members for tag, members in groups.items() if has_element_children(members[0])}
    return _largest_group(composite)


def _is_container(node) -> bool:
    children = element_children(node)
    if len(children) < 2:
        return False
    return all(has_element_children(child) or not node_text(child) for child in children)


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------
def find_record_elements(root) -> DiscoveryResult:
    """Return the elements that represent one record each."""

    tag, members, discarded = _repeating_children(root)
    if members:
        logging.debug("Found %s <%s> records directly under root", len(members), tag)
        return DiscoveryResult(tuple(members), TIER_DIRECT, (tag,), tuple(discarded))

    elements: List = []
    tags: List[str] = []
    container_discarded: List[Tuple[str, int]] = []
    for container in element_children(root):
        if not _is_container(container):
            continue
        tag, members, discarded = _repeating_children(container)
        if not members:
            continue
        logging.debug("Found %s <%s> records in container <%s>", len(members), tag, local_name(container.tag))
        elements.extend(members)
        if tag not in tags:
            tags.append(tag)
        container_discarded.extend(discarded)
    if elements:
        return DiscoveryResult(tuple(elements), TIER_CONTAINER, tuple(tags), tuple(container_discarded))

    descendants = (node for node in root.iter() if node is not root and isinstance(node.tag, str))
    groups = _group_by_name(node for node in descendants if has_element_children(node))
    tag, members, discarded = _largest_group(groups)
    if members:
        logging.debug("Found %s <%s> records by deep scan", len(members), tag)
        return DiscoveryResult(tuple(members), TIER_DEEP, (tag,), tuple(discarded))

    logging.warning("No repeating record element found under <%s>", local_name(root.tag))
    return DiscoveryResult()


def flatten(node) -> FieldMap:
    """Flatten the children of ``node`` into a field-map.

    Nested children are keyed ``parent_child``; attributes become
    ``child_attribute``. Repeated siblings are numbered from the second one
    on (``aka``, ``aka_2``) so no leaf is lost.
    """

    fields: FieldMap = {}
    seen: Dict[str, int] = {}
    for child in element_children(node):
        name = local_name(child.tag)
        seen[name] = seen.get(name, 0) + 1
        prefix = name if seen[name] == 1 else f"{name}_{seen[name]}"

        for attr, value in child.attrib.items():
            _store(fields, f"{prefix}_{local_name(attr)}", (value or "").strip())

        if has_element_children(child):
            for key, value in flatten(child).items():
                _store(fields, f"{prefix}_{key}", value)
        else:
            _store(fields, prefix, node_text(child))
    return fields


def discover_records(root) -> List[FieldMap]:
    """Find the record elements under ``root`` and flatten each of them."""

    records: List[FieldMap] = []
    for element in find_record_elements(root).elements:
        fields: FieldMap = {}
        for attr, value in element.attrib.items():
            _store(fields, local_name(attr), (value or "").strip())
        for key, value in flatten(element).items():
            _store(fields, key, value)
        records.append(fields)
    return records


def _store(fields: FieldMap, key: str, value: str) -> None:
    candidate = key
    suffix = 1
    while candidate in fields:
        suffix += 1
        candidate = f"{key}_{suffix}"
    fields[candidate] = value
