"""Hierarchy of actors shown in the editor's outliner, with selection helpers."""

from __future__ import annotations

from typing import Any, Iterator, MutableSet

from editorcore.components import PrimitiveComponent


def _set_selected(selection: MutableSet[int], uuid: int, selected: bool) -> None:
    if selected:
        selection.add(uuid)
    else:
        selection.discard(uuid)


class ActorTreeNode:
    """One row of the outliner: a labelled actor with child nodes.

    Selection state is a set of UUIDs. The open/closed state of tree rows is
    a set holding the UUIDs of the nodes that are open.
    """

    def __init__(
        self,
        label: str,
        type_name: str,
        parent: ActorTreeNode | None,
        uuid: int,
        actor: Any,
    ) -> None:
        self.visible = True
        self.unsaved = False
        self.pinned = False
        self.label = label
        self.type_name = type_name
        self.parent = parent
        self.children: list[ActorTreeNode] = []
        self.index_in_parent = len(parent.children) if parent is not None else 0
        self.uuid = uuid
        self.actor = actor
        self.is_selected = False
        if parent is not None:
            parent.add_child(self)

    def __repr__(self) -> str:
        return f"ActorTreeNode({self.label!r}, uuid={self.uuid})"

    def __iter__(self) -> Iterator[ActorTreeNode]:
        return iter(self.children)

    @property
    def is_folder(self) -> bool:
        """True if the node has children."""
        return bool(self.children)

    def add_child(self, child: ActorTreeNode) -> None:
        self.children.append(child)

    def remove_child(self, child: ActorTreeNode) -> None:
        """Remove ``child`` if present; absent children are ignored."""
        if child in self.children:
            self.children.remove(child)

    def set_visibility(self, visible: bool) -> None:
        """Show or hide the node and every primitive component of its actor."""
        self.visible = visible
        if self.actor is None:
            return
        for component in getattr(self.actor, "components", ()):
            if isinstance(component, PrimitiveComponent):
                component.can_be_rendered = visible

    def close_and_unselect_children(
        self,
        selection: MutableSet[int],
        open_nodes: MutableSet[int],
        depth: int = 0,
    ) -> int:
        """Close this subtree and unselect it.

        The node at depth 0 ends up selected if anything below it (or itself)
        was selected. Returns how many nodes were selected.
        """
        unselected = 1 if self.uuid in selection else 0
        if depth == 0 or self.uuid in open_nodes:
            for child in self.children:
                unselected += child.close_and_unselect_children(selection, open_nodes, depth + 1)
            open_nodes.discard(self.uuid)
        _set_selected(selection, self.uuid, depth == 0 and unselected > 0)
        return unselected

    def set_all_in_open_nodes(
        self,
        selection: MutableSet[int],
        open_nodes: MutableSet[int],
        selected: bool,
    ) -> None:
        """Select or unselect every visible node; the root itself is never selectable."""
        if self.parent is not None:
            _set_selected(selection, self.uuid, selected)
        if self.parent is None or self.uuid in open_nodes:
            for child in self.children:
                child.set_all_in_open_nodes(selection, open_nodes, selected)

    def next_in_visible_order(
        self, last: ActorTreeNode | None, open_nodes: MutableSet[int]
    ) -> ActorTreeNode | None:
        """Return the next node a user sees below this one, stopping at ``last``."""
        if self is last:
            return None
        if self.children and self.uuid in open_nodes:
            return self.children[0]
        node: ActorTreeNode = self
        while node.parent is not None:
            siblings = node.parent.children
            if node.index_in_parent + 1 < len(siblings):
                return siblings[node.index_in_parent + 1]
            node = node.parent
        return None

    def select_range(
        self,
        last: ActorTreeNode | None,
        selection: MutableSet[int],
        open_nodes: MutableSet[int],
        selected: bool,
    ) -> None:
        """Set the selection of every visible node from this one to ``last``."""
        node: ActorTreeNode | None = self
        while node is not None:
            _set_selected(selection, node.uuid, selected)
            node = node.next_in_visible_order(last, open_nodes)