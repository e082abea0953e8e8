"""
Registry of group trees keyed by fully qualified name.

Groups compare equal by name, which is fine for lookup keys but not for
structure, so the registry tracks roots by identity and resolves names
by walking the trees on demand.
"""

from typing import Dict, Iterator, List, Optional, TypeVar

from mcp_groups.core.entities import Group, Leaf, Prompt, Resource, Tool
from mcp_groups.core.exceptions import InvalidArgumentError
from mcp_groups.utils.config import get_config
from mcp_groups.utils.logging import get_logger

logger = get_logger(__name__)

L = TypeVar("L", bound=Leaf)


class GroupRegistry:
    """Forest of root groups with lookup by fully qualified name."""

    def __init__(self, separator: Optional[str] = None):
        """
        Initialize the registry.

        Args:
            separator: Path separator for ``ensure_group``; defaults to the
                configured ``tree.default_separator``
        """
        self.separator = separator or get_config().tree.default_separator
        self._roots: List[Group] = []

    @property
    def roots(self) -> List[Group]:
        return list(self._roots)

    def add_root(self, group: Group) -> bool:
        """
        Register a root group.

        Returns:
            False if the group is already registered

        Raises:
            InvalidArgumentError: If group is None or not a root
        """
        if group is None:
            raise InvalidArgumentError("root group must not be None")
        if not group.is_root:
            raise InvalidArgumentError(
                f"Group '{group.get_fully_qualified_name()}' is not a root group"
            )
        if any(root is group for root in self._roots):
            return False
        self._roots.append(group)
        logger.info(f"Registered root group {group.name}")
        return True

    def remove_root(self, group: Group) -> bool:
        """Unregister a root group. Returns False if it was not registered."""
        for i, root in enumerate(self._roots):
            if root is group:
                del self._roots[i]
                logger.info(f"Unregistered root group {group.name}")
                return True
        return False

    def _find_root(self, name: str) -> Optional[Group]:
        for root in self._roots:
            if root.name == name:
                return root
        return None

    def ensure_group(self, path: str) -> Group:
        """
        Return the group at ``path``, creating missing groups on the way.

        Args:
            path: Group names joined by the registry separator

        Returns:
            Deepest group of the path

        Raises:
            InvalidArgumentError: If path is empty or has an empty segment
        """
        if not path:
            raise InvalidArgumentError("group path must not be empty")
        names = path.split(self.separator)
        if any(not name for name in names):
            raise InvalidArgumentError(f"group path '{path}' has an empty segment")

        group = self._find_root(names[0])
        if group is None:
            group = Group(names[0], self.separator)
            self.add_root(group)

        for name in names[1:]:
            child = next((g for g in group.child_groups if g.name == name), None)
            if child is None:
                child = Group(name, self.separator)
                group.add_child_group(child)
            group = child
        return group

    def iter_groups(self) -> Iterator[Group]:
        """Every registered group, tree by tree, depth-first."""
        for root in self._roots:
            yield from root.walk()

    def get_group(self, fq_name: str) -> Optional[Group]:
        """Find a group by fully qualified name."""
        for group in self.iter_groups():
            if group.get_fully_qualified_name() == fq_name:
                return group
        return None

    def index(self) -> Dict[str, Group]:
        """Map of fully qualified name to group; the first group wins on clashes."""
        result: Dict[str, Group] = {}
        for group in self.iter_groups():
            result.setdefault(group.get_fully_qualified_name(), group)
        return result

    def _collect(self, attr: str) -> List[L]:
        seen = set()
        leaves: List[L] = []
        for group in self.iter_groups():
            for leaf in getattr(group, attr):
                if id(leaf) not in seen:
                    seen.add(id(leaf))
                    leaves.append(leaf)
        return leaves

    def tools(self) -> List[Tool]:
        return self._collect("child_tools")

    def prompts(self) -> List[Prompt]:
        return self._collect("child_prompts")

    def resources(self) -> List[Resource]:
        return self._collect("child_resources")
