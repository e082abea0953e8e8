"""
Conversion between the internal model and external representations.

A Converter maps one entity kind in both directions. Batch conversion
drops results that are None or empty instead of raising, so callers
that care about dropped items compare lengths or convert one at a time.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Generic, Iterable, List, Optional, Tuple, TypeVar

from mcp_groups.core.entities import Group
from mcp_groups.core.schema import GroupSchema
from mcp_groups.utils.logging import get_logger

logger = get_logger(__name__)

S = TypeVar("S")
R = TypeVar("R")
InternalT = TypeVar("InternalT")
ExternalT = TypeVar("ExternalT")


def _is_empty(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def convert_all(items: Iterable[S], convert: Callable[[S], Optional[R]]) -> List[R]:
    """
    Convert every item, dropping None or empty results.

    Args:
        items: Items to convert
        convert: Single-item conversion

    Returns:
        Converted items in input order, without the dropped ones
    """
    results: List[R] = []
    dropped = 0
    for item in items:
        converted = convert(item)
        if _is_empty(converted):
            dropped += 1
            continue
        results.append(converted)
    if dropped:
        logger.debug(f"Dropped {dropped} empty conversion result(s)")
    return results


class Converter(ABC, Generic[InternalT, ExternalT]):
    """Bidirectional mapping between an internal entity and its external form."""

    @abstractmethod
    def from_internal(self, item: InternalT) -> Optional[ExternalT]:
        """Convert an internal entity to its external representation."""

    @abstractmethod
    def to_internal(self, item: ExternalT) -> Optional[InternalT]:
        """Convert an external representation to an internal entity."""

    def from_internal_all(self, items: Iterable[InternalT]) -> List[ExternalT]:
        return convert_all(items, self.from_internal)

    def to_internal_all(self, items: Iterable[ExternalT]) -> List[InternalT]:
        return convert_all(items, self.to_internal)


class GroupSchemaConverter(Converter[Group, GroupSchema]):
    """
    Maps groups to and from the wire GroupSchema.

    The wire form carries the parent chain rather than the children, so
    converting to internal rebuilds every ancestor. Ancestors that share
    a fully qualified name within one converter are reused, which lets a
    flat list of wire groups rebuild a single forest.
    """

    def __init__(self, separator: Optional[str] = None):
        self.separator = separator
        self._built: Dict[Tuple[int, str], Group] = {}

    def reset(self) -> None:
        """Forget groups rebuilt by earlier ``to_internal`` calls."""
        self._built.clear()

    def from_internal(self, item: Group) -> Optional[GroupSchema]:
        if item is None:
            return None
        parent = self.from_internal(item.parent) if item.parent is not None else None
        return GroupSchema(
            name=item.name,
            title=item.title,
            description=item.description,
            parent=parent,
            meta=dict(item.meta) if item.meta is not None else None,
        )

    def to_internal(self, item: GroupSchema) -> Optional[Group]:
        if item is None:
            return None
        parent = self.to_internal(item.parent) if item.parent is not None else None

        key = (id(parent), item.name)
        group = self._built.get(key)
        if group is not None and group.parent is not parent:
            if group.parent is None:
                # Detached since it was built; the payload still names the parent.
                parent.add_child_group(group)
            else:
                # Moved under another group; build a fresh one for this payload.
                del self._built[key]
                group = None
        if group is None:
            group = Group(item.name, self.separator)
            self._built[key] = group
            if parent is not None:
                parent.add_child_group(group)

        # A later payload for an already built group overrides the fields it sets.
        if item.title is not None:
            group.title = item.title
        if item.description is not None:
            group.description = item.description
        if item.meta is not None:
            group.meta = dict(item.meta)
        return group
