"""Reactive tree nodes with change notification and bubbling."""

from __future__ import annotations

from typing import Any, Callable

Callback = Callable[["Node | ListNode", str, Any, Any], None]


def _adopt(value: Any, parent: Node | ListNode, key: str) -> Any:
    """Wrap plain dicts as Nodes and point child nodes at their new parent."""
    if isinstance(value, dict):
        return Node(_parent=parent, _key=key, **value)
    if isinstance(value, (Node, ListNode)):
        object.__setattr__(value, "_parent", parent)
        object.__setattr__(value, "_key", key)
    return value


def _release(value: Any) -> None:
    """Detach a removed child so it no longer bubbles into its old parent."""
    if isinstance(value, (Node, ListNode)):
        object.__setattr__(value, "_parent", None)
        object.__setattr__(value, "_key", None)


def _emit(node: Node | ListNode, key: str, old: Any, new: Any) -> None:
    """Fire watchers for key on node, then on every ancestor along the chain."""
    for cb in list(node._watchers.get(key, ())):
        cb(node, key, old, new)
    child = node
    while child._parent is not None:
        parent = child._parent
        for cb in list(parent._watchers.get(child._key, ())):
            cb(node, key, old, new)
        child = parent


def _unwatcher(watchers: dict, key: str, callback: Callback) -> Callable[[], None]:
    def unwatch() -> None:
        callbacks = watchers.get(key, [])
        if callback in callbacks:
            callbacks.remove(callback)

    return unwatch


class Node:
    """Reactive record in the tree.

    Fields are read and written as attributes. Reading a missing field
    gives None and assigning None removes it. Assigned dicts become child
    Nodes. Every change fires the field's watchers and bubbles up through
    the parent chain, so a watcher near the root sees the whole subtree.
    """

    def __init__(
        self,
        _parent: Node | ListNode | None = None,
        _key: str | None = None,
        **fields: Any,
    ) -> None:
        object.__setattr__(self, "_fields", {})
        object.__setattr__(self, "_watchers", {})
        object.__setattr__(self, "_parent", None)
        object.__setattr__(self, "_key", _key)
        object.__setattr__(self, "_version", 0)
        for name, value in fields.items():
            setattr(self, name, value)
        object.__setattr__(self, "_parent", _parent)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._fields.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        old = self._fields.get(name)
        if value is None:
            self._fields.pop(name, None)
        else:
            value = _adopt(value, parent=self, key=name)
            self._fields[name] = value
        if old is not value and old != value:
            self._version += 1
            _emit(self, name, old, value)

    def __contains__(self, name: str) -> bool:
        return name in self._fields

    def watch(self, name: str, callback: Callback) -> Callable[[], None]:
        """Call callback whenever field name (or anything below it) changes.

        Returns a callable that removes the watcher.
        """
        self._watchers.setdefault(name, []).append(callback)
        return _unwatcher(self._watchers, name, callback)

    def keys(self):
        return self._fields.keys()

    def items(self):
        return self._fields.items()

    @property
    def path(self) -> str:
        """Dotted path from the root to this node."""
        parts: list[str] = []
        current: Node | ListNode | None = self
        while current is not None and current._key is not None:
            parts.append(current._key)
            current = current._parent
        return ".".join(reversed(parts))

    def __repr__(self) -> str:
        p = self.path
        label = f"Node({p})" if p else "Node"
        return f"<{label} [{', '.join(self._fields)}]>"


class ListNode:
    """Id-keyed child collection that remembers insertion order.

    Items are looked up by string id; a missing id gives None. Setting an
    id to None removes it. Insertion order is storage order only: callers
    that need a position use the children's ``order`` field instead.
    """

    def __init__(
        self,
        _parent: Node | None = None,
        _key: str | None = None,
    ) -> None:
        object.__setattr__(self, "_by_id", {})
        object.__setattr__(self, "_watchers", {})
        object.__setattr__(self, "_parent", _parent)
        object.__setattr__(self, "_key", _key)
        object.__setattr__(self, "_version", 0)

    def __getitem__(self, item_id: str) -> Any:
        return self._by_id.get(str(item_id))

    def __setitem__(self, item_id: str, value: Any) -> None:
        item_id = str(item_id)
        old = self._by_id.get(item_id)
        if value is None:
            if item_id not in self._by_id:
                return
            del self._by_id[item_id]
            _release(old)
        else:
            value = _adopt(value, parent=self, key=item_id)
            self._by_id[item_id] = value
            if old is value:
                return
        self._version += 1
        _emit(self, item_id, old, value)

    def pop(self, item_id: str) -> Any:
        """Remove and return an item, or None if it is not present."""
        item = self[item_id]
        self[item_id] = None
        return item

    def __iter__(self):
        return iter(list(self._by_id.values()))

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, item_id: str) -> bool:
        return str(item_id) in self._by_id

    def watch(self, item_id: str, callback: Callback) -> Callable[[], None]:
        """Watch one item id. Returns an unwatch callable."""
        item_id = str(item_id)
        self._watchers.setdefault(item_id, []).append(callback)
        return _unwatcher(self._watchers, item_id, callback)

    def keys(self) -> list[str]:
        return list(self._by_id)

    def items(self) -> list[tuple[str, Any]]:
        return list(self._by_id.items())

    @property
    def path(self) -> str:
        parts: list[str] = []
        current: Node | ListNode | None = self
        while current is not None and current._key is not None:
            parts.append(current._key)
            current = current._parent
        return ".".join(reversed(parts))

    def __repr__(self) -> str:
        p = self.path
        label = f"ListNode({p})" if p else "ListNode"
        return f"<{label} [{', '.join(self._by_id)}]>"
