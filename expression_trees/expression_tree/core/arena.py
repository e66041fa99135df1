from typing import Iterator, List, Optional

from ...errors import InvalidPosition


class ExpressionTree:
  """Binary tree of string payloads stored in an arena of integer positions.

  Payloads and parent/left/right links live in parallel lists indexed by
  position. Slots released by removals are kept on a free list and handed out
  again by later insertions, so positions are only stable while the node they
  name is part of the tree.
  """

  __slots__ = ('_element', '_parent', '_left', '_right', '_alive', '_free', '_root', '_size')

  def __init__(self):
    self._element: List[Optional[str]] = []
    self._parent: List[Optional[int]] = []
    self._left: List[Optional[int]] = []
    self._right: List[Optional[int]] = []
    self._alive: List[bool] = []
    self._free: List[int] = []
    self._root: Optional[int] = None
    self._size = 0

  # ------------------------------------------------------------------
  # slot management
  # ------------------------------------------------------------------

  def _allocate(self, value: Optional[str], parent: Optional[int]) -> int:
    if self._free:
      p = self._free.pop()
      self._element[p] = value
      self._parent[p] = parent
      self._left[p] = None
      self._right[p] = None
      self._alive[p] = True
    else:
      p = len(self._element)
      self._element.append(value)
      self._parent.append(parent)
      self._left.append(None)
      self._right.append(None)
      self._alive.append(True)
    self._size += 1
    return p

  def _release(self, p: int):
    self._element[p] = None
    self._parent[p] = None
    self._left[p] = None
    self._right[p] = None
    self._alive[p] = False
    self._free.append(p)
    self._size -= 1

  def _validate(self, p) -> int:
    if isinstance(p, bool) or not isinstance(p, int):
      raise InvalidPosition(f"position must be an int, got {type(p).__name__}")
    if p < 0 or p >= len(self._alive) or not self._alive[p]:
      raise InvalidPosition(f"position {p} is not part of this tree")
    return p

  def _relink(self, old: int, new: Optional[int]):
    """Put `new` where `old` hangs off its parent (or at the root)."""
    parent = self._parent[old]
    if parent is None:
      self._root = new
    elif self._left[parent] == old:
      self._left[parent] = new
    else:
      self._right[parent] = new
    if new is not None:
      self._parent[new] = parent

  # ------------------------------------------------------------------
  # navigation
  # ------------------------------------------------------------------

  def root(self) -> Optional[int]:
    return self._root

  def size(self) -> int:
    return self._size

  def __len__(self) -> int:
    return self._size

  def is_empty(self) -> bool:
    return self._size == 0

  def element(self, p: int) -> Optional[str]:
    return self._element[self._validate(p)]

  def parent(self, p: int) -> Optional[int]:
    return self._parent[self._validate(p)]

  def left(self, p: int) -> Optional[int]:
    return self._left[self._validate(p)]

  def right(self, p: int) -> Optional[int]:
    return self._right[self._validate(p)]

  def children(self, p: int) -> List[int]:
    self._validate(p)
    return [c for c in (self._left[p], self._right[p]) if c is not None]

  def num_children(self, p: int) -> int:
    return len(self.children(p))

  def is_external(self, p: int) -> bool:
    return self.num_children(p) == 0

  def is_internal(self, p: int) -> bool:
    return self.num_children(p) > 0

  def is_root(self, p: int) -> bool:
    return self._validate(p) == self._root

  # ------------------------------------------------------------------
  # mutation
  # ------------------------------------------------------------------

  def add_root(self, value: Optional[str]) -> int:
    if self._root is not None:
      raise ValueError("tree already has a root")
    self._root = self._allocate(value, None)
    return self._root

  def add_left(self, p: int, value: Optional[str]) -> int:
    self._validate(p)
    if self._left[p] is not None:
      raise ValueError(f"position {p} already has a left child")
    child = self._allocate(value, p)
    self._left[p] = child
    return child

  def add_right(self, p: int, value: Optional[str]) -> int:
    self._validate(p)
    if self._right[p] is not None:
      raise ValueError(f"position {p} already has a right child")
    child = self._allocate(value, p)
    self._right[p] = child
    return child

  def set(self, p: int, value: Optional[str]) -> Optional[str]:
    """Replace the payload at p, returning the old one."""
    self._validate(p)
    old = self._element[p]
    self._element[p] = value
    return old

  def attach(self, p: int, left: 'ExpressionTree', right: 'ExpressionTree'):
    """Copy two trees under the leaf p and empty them."""
    self._validate(p)
    if not self.is_external(p):
      raise ValueError(f"position {p} must be a leaf to attach subtrees")
    for donor, side in ((left, self._left), (right, self._right)):
      if donor is self:
        raise ValueError("cannot attach a tree to itself")
      if donor is None or donor.is_empty():
        continue
      side[p] = self._graft(donor, donor.root(), p)
      donor.clear()

  def _graft(self, donor: 'ExpressionTree', src: int, parent: int) -> int:
    top = self._allocate(donor._element[src], parent)
    stack = [(src, top)]
    while stack:
      s, d = stack.pop()
      for links, dest_links in ((donor._left, self._left), (donor._right, self._right)):
        child = links[s]
        if child is not None:
          copied = self._allocate(donor._element[child], d)
          dest_links[d] = copied
          stack.append((child, copied))
    return top

  def remove(self, p: int) -> Optional[str]:
    """Remove a node with at most one child; the child takes its place."""
    self._validate(p)
    kids = self.children(p)
    if len(kids) == 2:
      raise ValueError(f"position {p} has two children and cannot be removed")
    child = kids[0] if kids else None
    self._relink(p, child)
    value = self._element[p]
    self._release(p)
    return value

  def prune(self, p: int):
    """Remove the whole subtree rooted at p."""
    self._validate(p)
    self._relink(p, None)
    for q in list(self.postorder(p)):
      self._release(q)

  def replace_subtree(self, p: int, q: int):
    """Move the subtree rooted at q into p's place, discarding the rest of p's subtree.

    q must be a proper descendant of p. Only the links at p's parent change for
    the kept subtree; the discarded nodes are released.
    """
    self._validate(p)
    self._validate(q)
    if p == q:
      return
    ancestor = self._parent[q]
    while ancestor is not None and ancestor != p:
      ancestor = self._parent[ancestor]
    if ancestor is None:
      raise ValueError(f"position {q} is not inside the subtree rooted at {p}")
    self._relink(q, None)
    self._relink(p, q)
    self._parent[p] = None
    for r in list(self.postorder(p)):
      self._release(r)

  def clear(self):
    self.__init__()

  def copy(self) -> 'ExpressionTree':
    """Independent copy; positions in the copy match positions in this tree."""
    other = ExpressionTree()
    other._element = list(self._element)
    other._parent = list(self._parent)
    other._left = list(self._left)
    other._right = list(self._right)
    other._alive = list(self._alive)
    other._free = list(self._free)
    other._root = self._root
    other._size = self._size
    return other

  # ------------------------------------------------------------------
  # traversal (iterative, so depth is not bounded by the recursion limit)
  # ------------------------------------------------------------------

  def _start(self, p: Optional[int]) -> Optional[int]:
    if p is None:
      return self._root
    return self._validate(p)

  def preorder(self, p: Optional[int] = None) -> Iterator[int]:
    start = self._start(p)
    if start is None:
      return
    stack = [start]
    while stack:
      node = stack.pop()
      yield node
      if self._right[node] is not None:
        stack.append(self._right[node])
      if self._left[node] is not None:
        stack.append(self._left[node])

  def inorder(self, p: Optional[int] = None) -> Iterator[int]:
    node = self._start(p)
    stack: List[int] = []
    while stack or node is not None:
      while node is not None:
        stack.append(node)
        node = self._left[node]
      node = stack.pop()
      yield node
      node = self._right[node]

  def postorder(self, p: Optional[int] = None) -> Iterator[int]:
    start = self._start(p)
    if start is None:
      return
    stack = [start]
    order: List[int] = []
    while stack:
      node = stack.pop()
      order.append(node)
      if self._left[node] is not None:
        stack.append(self._left[node])
      if self._right[node] is not None:
        stack.append(self._right[node])
    yield from reversed(order)

  def positions(self) -> Iterator[int]:
    return self.preorder()

  def __iter__(self) -> Iterator[Optional[str]]:
    for p in self.preorder():
      yield self._element[p]

  def __repr__(self) -> str:
    return f"ExpressionTree(size={self._size}, root={self._root})"
