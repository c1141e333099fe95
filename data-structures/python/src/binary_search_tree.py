from collections import deque
from typing import Any, Deque, Generic, Iterator, List, Optional, Protocol, TypeVar


class SupportsOrdering(Protocol):
    def __lt__(self, other: Any) -> bool: ...
    def __gt__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=SupportsOrdering)


class BinarySearchTree(Generic[T]):
    class Node:
        def __init__(
            self,
            value: T,
            left: Optional['BinarySearchTree.Node'] = None,
            right: Optional['BinarySearchTree.Node'] = None,
        ) -> None:
            self.value: T = value
            self.left = left
            self.right = right

        def __repr__(self) -> str:
            return f"Node({self.value!r})"

    def __init__(self, root: Optional[Node] = None) -> None:
        self._root: Optional[BinarySearchTree.Node] = root
        self._size: int = len(self.bfs())

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def insert(self, value: T) -> 'BinarySearchTree[T]':
        if self._root is None:
            self._root = BinarySearchTree.Node(value)
            self._size += 1
            return self

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BinarySearchTree.Node(value)
                    self._size += 1
                    return self
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = BinarySearchTree.Node(value)
                    self._size += 1
                    return self
                node = node.right
            else:
                return self

    def insert_recursively(self, value: T) -> 'BinarySearchTree[T]':
        if self._root is None:
            self._root = BinarySearchTree.Node(value)
            self._size += 1
        else:
            self._insert_recursively(self._root, value)
        return self

    def find(self, value: T) -> Optional[Node]:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def find_recursively(self, value: T) -> Optional[Node]:
        if self._root is None:
            return None
        return self._find_recursively(self._root, value)

    def remove(self, value: T) -> Optional[Node]:
        """Remove ``value`` and return a detached node holding it.

        The parent link is found by walking down from the root. The root is
        hung as the right child of a throwaway sentinel so that it can be
        relinked like any other child. A node with two children is replaced by
        its in-order successor: directly when the right child has no left
        subtree, otherwise by copying the leftmost value up and unlinking the
        leftmost node. Returns None when the value is absent.
        """
        sentinel = BinarySearchTree.Node(None, right=self._root)
        parent = sentinel
        node = self._root
        while node is not None:
            if value < node.value:
                parent, node = node, node.left
            elif value > node.value:
                parent, node = node, node.right
            else:
                break

        if node is None:
            return None

        removed = node
        if node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)
        elif node.right.left is None:
            successor = node.right
            successor.left = node.left
            self._replace_child(parent, node, successor)
        else:
            successor_parent = node.right
            successor = successor_parent.left
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            removed = BinarySearchTree.Node(node.value)
            node.value = successor.value
            successor_parent.left = successor.right

        self._root = sentinel.right
        self._size -= 1
        removed.left = None
        removed.right = None
        return removed

    def dfs_pre_order(self) -> List[T]:
        result: List[T] = []

        def traverse(node: Optional[BinarySearchTree.Node]) -> None:
            if node is None:
                return
            result.append(node.value)
            traverse(node.left)
            traverse(node.right)

        traverse(self._root)
        return result

    def dfs_in_order(self) -> List[T]:
        result: List[T] = []

        def traverse(node: Optional[BinarySearchTree.Node]) -> None:
            if node is None:
                return
            traverse(node.left)
            result.append(node.value)
            traverse(node.right)

        traverse(self._root)
        return result

    def dfs_post_order(self) -> List[T]:
        result: List[T] = []

        def traverse(node: Optional[BinarySearchTree.Node]) -> None:
            if node is None:
                return
            traverse(node.left)
            traverse(node.right)
            result.append(node.value)

        traverse(self._root)
        return result

    def dfs_in_order_iterative(self) -> List[T]:
        result: List[T] = []
        stack: List[BinarySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def bfs(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        queue: Deque[BinarySearchTree.Node] = deque([self._root])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def is_balanced(self, node: Optional[Node] = None) -> bool:
        """Compare the shortest and longest paths below ``node`` (default root).

        Only the given node is checked, so a tree can pass while one of its
        subtrees is lopsided.
        """
        if node is None:
            node = self._root
        if node is None:
            return True
        return self._max_depth(node) - self._min_depth(node) <= 1

    def find_second_highest(self, node: Optional[Node] = None) -> Optional[T]:
        """Walk right looking for the parent of the rightmost leaf.

        When a node on the way has only a left child the search restarts in
        that left subtree. This does not cover every shape: a left child that
        is itself a leaf yields None.
        """
        if self._root is None or (self._root.left is None and self._root.right is None):
            return None

        current = node if node is not None else self._root
        while current is not None:
            if current.left is not None and current.right is None:
                return self.find_second_highest(current.left)
            right = current.right
            if right is not None and right.left is None and right.right is None:
                return current.value
            current = right
        return None

    def contains(self, value: T) -> bool:
        return self.find(value) is not None

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def height(self) -> int:
        levels = 0
        if self._root is None:
            return levels
        queue: Deque[BinarySearchTree.Node] = deque([self._root])
        while queue:
            levels += 1
            for _ in range(len(queue)):
                node = queue.popleft()
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
        return levels

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def _insert_recursively(self, node: Node, value: T) -> None:
        if value < node.value:
            if node.left is None:
                node.left = BinarySearchTree.Node(value)
                self._size += 1
                return
            self._insert_recursively(node.left, value)
        elif value > node.value:
            if node.right is None:
                node.right = BinarySearchTree.Node(value)
                self._size += 1
                return
            self._insert_recursively(node.right, value)

    def _find_recursively(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            return None
        if value < node.value:
            return self._find_recursively(node.left, value)
        if value > node.value:
            return self._find_recursively(node.right, value)
        return node

    def _replace_child(self, parent: Node, child: Node, replacement: Optional[Node]) -> None:
        if parent.left is child:
            parent.left = replacement
        else:
            parent.right = replacement

    def _min_depth(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return 1 + min(self._min_depth(node.left), self._min_depth(node.right))

    def _max_depth(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return 1 + max(self._max_depth(node.left), self._max_depth(node.right))

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.dfs_in_order_iterative())

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.dfs_in_order_iterative()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size})"
