from collections import deque


class TreeNode:
    def __init__(self, key, value):
        self.key = key
        self.value = value
        self.height = 0
        self.left = None
        self.right = None

    def is_leaf(self):
        return self.left is None and self.right is None

    @property
    def left_height(self) -> int:
        if self.left:
            return self.left.height
        else:
            return -1

    @property
    def right_height(self) -> int:
        if self.right:
            return self.right.height
        else:
            return -1

    @property
    def balance(self) -> int:
        return self.right_height - self.left_height

    def update(self):
        self.height = 1 + max(self.left_height, self.right_height)

    def __repr__(self):
        return "TreeNode({!r}, {!r})".format(self.key, self.value)


def height(node) -> int:
    if node:
        return node.height
    else:
        return -1


class AVLTree():
    def __init__(self):
        self.root = None
        self.size = 0

    def __len__(self):
        return self.size

    def __bool__(self):
        return self.root is not None

    def __contains__(self, key):
        return self._find(self.root, key) is not None

    def __iter__(self):
        for key, value in self.inorder():
            yield key

    @property
    def height(self) -> int:
        return height(self.root)

    def insert(self, key, value):
        self.root = self._insert(self.root, key, value)

    def _insert(self, node: TreeNode, key, value) -> TreeNode:
        if not node:
            self.size += 1
            return TreeNode(key, value)

        if key < node.key:
            node.left = self._insert(node.left, key, value)
        elif key > node.key:
            node.right = self._insert(node.right, key, value)
        else:
            node.value = value
            return node

        node.update()
        return self.rebalance(node)

    def delete(self, key):
        self.root = self._delete(self.root, key)

    def _delete(self, node: TreeNode, key):
        if not node:
            return None

        if key < node.key:
            node.left = self._delete(node.left, key)
        elif key > node.key:
            node.right = self._delete(node.right, key)
        elif node.left is None:
            self.size -= 1
            return node.right
        elif node.right is None:
            self.size -= 1
            return node.left
        else:
            # copy the in-order successor up, then remove it from the right
            successor = self._min(node.right)
            node.key = successor.key
            node.value = successor.value
            node.right = self._delete(node.right, successor.key)

        node.update()
        return self.rebalance(node)

    def rebalance(self, node: TreeNode) -> TreeNode:
        balance = node.balance
        if balance < -1:
            return self.fix_left_imbalance(node)
        elif balance > 1:
            return self.fix_right_imbalance(node)
        else:
            return node

    def fix_left_imbalance(self, node: TreeNode) -> TreeNode:
        child = node.left
        if height(child.right) > height(child.left):
            node.left = self.rotate_left(child)
        return self.rotate_right(node)

    def fix_right_imbalance(self, node: TreeNode) -> TreeNode:
        child = node.right
        if height(child.left) > height(child.right):
            node.right = self.rotate_right(child)
        return self.rotate_left(node)

    def rotate_left(self, node: TreeNode) -> TreeNode:
        pivot = node.right
        node.right = pivot.left
        pivot.left = node

        # node is now below pivot, so its height goes first
        node.update()
        pivot.update()
        return pivot

    def rotate_right(self, node: TreeNode) -> TreeNode:
        pivot = node.left
        node.left = pivot.right
        pivot.right = node

        node.update()
        pivot.update()
        return pivot

    def _find(self, node: TreeNode, key):
        if not node:
            return None
        if key == node.key:
            return node
        if key < node.key:
            return self._find(node.left, key)
        return self._find(node.right, key)

    def search(self, key):
        """Value stored under key, or None when the key is absent."""
        return self.get(key)

    def get(self, key, default=None):
        node = self._find(self.root, key)
        if node is None:
            return default
        return node.value

    def _min(self, node: TreeNode) -> TreeNode:
        while node.left:
            node = node.left
        return node

    def _max(self, node: TreeNode) -> TreeNode:
        while node.right:
            node = node.right
        return node

    def find_min(self):
        if not self.root:
            return None
        return self._min(self.root)

    def find_max(self):
        if not self.root:
            return None
        return self._max(self.root)

    def is_balanced(self) -> bool:
        def balanced(node):
            if not node:
                return True
            if abs(height(node.left) - height(node.right)) > 1:
                return False
            return balanced(node.left) and balanced(node.right)
        return balanced(self.root)

    def is_ordered(self) -> bool:
        keys = list(self)
        return all(a < b for a, b in zip(keys, keys[1:]))

    def preorder(self):
        def walk(node):
            if node:
                yield node.key, node.value
                yield from walk(node.left)
                yield from walk(node.right)
        return walk(self.root)

    def inorder(self):
        def walk(node):
            if node:
                yield from walk(node.left)
                yield node.key, node.value
                yield from walk(node.right)
        return walk(self.root)

    def postorder(self):
        def walk(node):
            if node:
                yield from walk(node.left)
                yield from walk(node.right)
                yield node.key, node.value
        return walk(self.root)

    def breadth_first(self):
        queue = deque()
        if self.root:
            queue.append(self.root)
        while queue:
            node = queue.popleft()
            if node.left:
                queue.append(node.left)
            if node.right:
                queue.append(node.right)
            yield node.key, node.value

    def walk(self, start, stop):
        """In-order pairs with start <= key <= stop, skipping subtrees outside the range."""
        def walk(node):
            if not node:
                return
            if start < node.key:
                yield from walk(node.left)
            if start <= node.key and node.key <= stop:
                yield node.key, node.value
            if node.key < stop:
                yield from walk(node.right)
        return walk(self.root)

    def traverse(self, order):
        orders = {
            "preorder": self.preorder,
            "inorder": self.inorder,
            "postorder": self.postorder,
            "breadth_first": self.breadth_first,
        }
        if order not in orders:
            raise ValueError("unknown traversal order {}".format(order))
        return orders[order]()
