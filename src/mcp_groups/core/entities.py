"""
Named entities and the group tree for MCP Groups.

A Group owns ordered collections of child groups and child leaves
(tools, prompts, resources). Groups form a single-parent tree; leaves may
belong to any number of groups. All structural membership checks use
reference identity, while equality and hashing use the entity name so
entities can serve as lookup keys.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Optional, TypeVar

from mcp_groups.core.exceptions import CycleDetectedError, InvalidArgumentError
from mcp_groups.core.models import Annotations, Icon, ToolAnnotations
from mcp_groups.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def _index_of(items: List[T], item: T) -> int:
    """Position of ``item`` in ``items`` by identity, or -1."""
    for i, candidate in enumerate(items):
        if candidate is item:
            return i
    return -1


def _append_unique(items: List[T], item: T) -> bool:
    if _index_of(items, item) != -1:
        return False
    items.append(item)
    return True


def _remove_identical(items: List[T], item: T) -> bool:
    index = _index_of(items, item)
    if index == -1:
        return False
    del items[index]
    return True


def _require(value: Any, what: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{what} must not be None")


class NamedEntity(ABC):
    """
    Common identity for every entity in the model.

    Two entities compare equal when they are of the same concrete class
    and share a name. Use ``is_same`` for identity.
    """

    DEFAULT_SEPARATOR = "."

    def __init__(self, name: str, name_separator: Optional[str] = None):
        """
        Initialize a named entity.

        Args:
            name: Entity name, must be non-empty
            name_separator: Separator used when building qualified names

        Raises:
            InvalidArgumentError: If name is None or empty
        """
        if name is None or name == "":
            raise InvalidArgumentError("name must not be null or empty")
        self._name = name
        self._name_separator = (
            name_separator if name_separator is not None else self.DEFAULT_SEPARATOR
        )
        self.title: Optional[str] = None
        self.description: Optional[str] = None
        self.meta: Optional[Dict[str, Any]] = None
        self.icons: Optional[List[Icon]] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def name_separator(self) -> str:
        return self._name_separator

    @abstractmethod
    def get_fully_qualified_name(self) -> str:
        """Return the qualified name of this entity."""

    def is_same(self, other: Any) -> bool:
        """Reference identity, independent of name equality."""
        return other is self

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash((type(self), self._name))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, "
            f"fq_name={self.get_fully_qualified_name()!r}, title={self.title!r})"
        )


class PromptArgument(NamedEntity):
    """Named argument accepted by a prompt."""

    def __init__(self, name: str, required: bool = False, name_separator: Optional[str] = None):
        super().__init__(name, name_separator)
        self.required = required

    def get_fully_qualified_name(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"PromptArgument(name={self.name!r}, required={self.required!r})"


class Leaf(NamedEntity):
    """
    Entity that can be a member of several groups at once.

    Membership is maintained by Group's add/remove operations, which call
    ``add_parent_group`` and ``remove_parent_group`` on the leaf.
    """

    def __init__(self, name: str, name_separator: Optional[str] = None):
        super().__init__(name, name_separator)
        self._parent_groups: List["Group"] = []

    @property
    def parent_groups(self) -> List["Group"]:
        return self._parent_groups

    def add_parent_group(self, group: "Group") -> bool:
        """
        Register a parent group.

        Returns:
            False if the group is already registered

        Raises:
            InvalidArgumentError: If group is None
        """
        _require(group, "parent group")
        return _append_unique(self._parent_groups, group)

    def remove_parent_group(self, group: "Group") -> bool:
        """Unregister a parent group. Returns False if it was not registered."""
        return _remove_identical(self._parent_groups, group)

    def get_parent_group_roots(self) -> List["Group"]:
        """Root of every parent group, one entry per parent group."""
        return [group.get_root() for group in self._parent_groups]

    def get_fully_qualified_name(self) -> str:
        # Leaves can have several parents, so the name carries no path.
        return self.name


class Tool(Leaf):
    """Tool entity."""

    def __init__(self, name: str, name_separator: Optional[str] = None):
        super().__init__(name, name_separator)
        self.input_schema: Optional[str] = None
        self.output_schema: Optional[str] = None
        self.tool_annotations: Optional[ToolAnnotations] = None


class Prompt(Leaf):
    """Prompt entity with an ordered list of arguments."""

    def __init__(self, name: str, name_separator: Optional[str] = None):
        super().__init__(name, name_separator)
        self._prompt_arguments: List[PromptArgument] = []

    @property
    def prompt_arguments(self) -> List[PromptArgument]:
        return self._prompt_arguments

    def add_prompt_argument(self, argument: PromptArgument) -> bool:
        _require(argument, "prompt argument")
        return _append_unique(self._prompt_arguments, argument)

    def remove_prompt_argument(self, argument: PromptArgument) -> bool:
        return _remove_identical(self._prompt_arguments, argument)


class Resource(Leaf):
    """Resource entity."""

    def __init__(self, name: str, name_separator: Optional[str] = None):
        super().__init__(name, name_separator)
        self.uri: Optional[str] = None
        self.size: Optional[float] = None
        self.mime_type: Optional[str] = None
        self.annotations: Optional[Annotations] = None


class Group(NamedEntity):
    """
    Named node of a single-parent tree.

    The parent to child lists are the owning edges. ``parent`` is a
    back-reference for lookups only; it is set by ``add_child_group`` and
    cleared by ``remove_child_group``.
    """

    def __init__(self, name: str, name_separator: Optional[str] = None):
        super().__init__(name, name_separator)
        self._parent: Optional["Group"] = None
        self._child_groups: List["Group"] = []
        self._child_tools: List[Tool] = []
        self._child_prompts: List[Prompt] = []
        self._child_resources: List[Resource] = []

    @property
    def parent(self) -> Optional["Group"]:
        return self._parent

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def child_groups(self) -> List["Group"]:
        return self._child_groups

    @property
    def child_tools(self) -> List[Tool]:
        return self._child_tools

    @property
    def child_prompts(self) -> List[Prompt]:
        return self._child_prompts

    @property
    def child_resources(self) -> List[Resource]:
        return self._child_resources

    def get_root(self) -> "Group":
        """Return the ancestor that has no parent (self for a root)."""
        node = self
        parent = node.parent
        while parent is not None:
            node = parent
            parent = node.parent
        return node

    def get_ancestors(self) -> List["Group"]:
        """Ancestors from the direct parent up to the root."""
        ancestors = []
        parent = self.parent
        while parent is not None:
            ancestors.append(parent)
            parent = parent.parent
        return ancestors

    def walk(self) -> Iterator["Group"]:
        """Depth-first, pre-order iteration over this group and its descendants."""
        stack = [self]
        while stack:
            group = stack.pop()
            yield group
            stack.extend(reversed(group._child_groups))

    def add_child_group(self, child: "Group") -> bool:
        """
        Attach a child group.

        Args:
            child: Group to attach

        Returns:
            True if attached, False if already a child of this group

        Raises:
            InvalidArgumentError: If child is None or attached elsewhere
            CycleDetectedError: If child is this group or one of its ancestors
        """
        _require(child, "child group")
        if _index_of(self._child_groups, child) != -1:
            return False
        if child is self or _index_of(self.get_ancestors(), child) != -1:
            raise CycleDetectedError(
                f"Cannot add '{child.get_fully_qualified_name()}' as a child of "
                f"'{self.get_fully_qualified_name()}': it is an ancestor",
                parent=self.get_fully_qualified_name(),
                child=child.get_fully_qualified_name(),
            )
        current = child.parent
        if current is not None:
            raise InvalidArgumentError(
                f"Group '{child.get_fully_qualified_name()}' already has a parent; "
                f"remove it from '{current.get_fully_qualified_name()}' first",
                details={"parent": current.get_fully_qualified_name()},
            )
        self._child_groups.append(child)
        child._parent = self
        logger.debug(f"Attached group {child.name} to {self.get_fully_qualified_name()}")
        return True

    def remove_child_group(self, child: "Group") -> bool:
        """Detach a child group. Returns False if it is not a child of this group."""
        if not _remove_identical(self._child_groups, child):
            return False
        child._parent = None
        logger.debug(f"Detached group {child.name} from {self.get_fully_qualified_name()}")
        return True

    def _add_leaf(self, children: List[Any], leaf: Leaf) -> bool:
        _require(leaf, "child")
        if not _append_unique(children, leaf):
            return False
        leaf.add_parent_group(self)
        logger.debug(
            f"Attached {type(leaf).__name__.lower()} {leaf.name} to "
            f"{self.get_fully_qualified_name()}"
        )
        return True

    def _remove_leaf(self, children: List[Any], leaf: Leaf) -> bool:
        if not _remove_identical(children, leaf):
            return False
        leaf.remove_parent_group(self)
        logger.debug(
            f"Detached {type(leaf).__name__.lower()} {leaf.name} from "
            f"{self.get_fully_qualified_name()}"
        )
        return True

    def add_child_tool(self, tool: Tool) -> bool:
        return self._add_leaf(self._child_tools, tool)

    def remove_child_tool(self, tool: Tool) -> bool:
        return self._remove_leaf(self._child_tools, tool)

    def add_child_prompt(self, prompt: Prompt) -> bool:
        return self._add_leaf(self._child_prompts, prompt)

    def remove_child_prompt(self, prompt: Prompt) -> bool:
        return self._remove_leaf(self._child_prompts, prompt)

    def add_child_resource(self, resource: Resource) -> bool:
        return self._add_leaf(self._child_resources, resource)

    def remove_child_resource(self, resource: Resource) -> bool:
        return self._remove_leaf(self._child_resources, resource)

    def _qualified_name_of(self, group: "Group") -> str:
        parent = group.parent
        if parent is None:
            return group.name
        # Each segment is joined with the separator of the group being asked.
        return self._qualified_name_of(parent) + self.name_separator + group.name

    def get_fully_qualified_name(self) -> str:
        return self._qualified_name_of(self)

    def __repr__(self) -> str:
        return (
            f"Group(name={self.name!r}, fq_name={self.get_fully_qualified_name()!r}, "
            f"is_root={self.is_root}, child_groups={len(self._child_groups)}, "
            f"child_tools={len(self._child_tools)}, child_prompts={len(self._child_prompts)}, "
            f"child_resources={len(self._child_resources)})"
        )
