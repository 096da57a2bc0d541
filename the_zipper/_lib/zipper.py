"""
Huet's zipper over Item/Section trees.

A Location is a cursor (the tree in focus) plus a path describing the
hole the cursor was taken out of. Every move or edit returns a new
Location; nothing is ever mutated, so old locations stay valid.
Moves and edits that are structurally impossible return None.

see http://en.wikipedia.org/wiki/Zipper_(data_structure)
"""
from collections import namedtuple

from .memo import MemoLocation
from .tree import Section, Variant, is_section


class ZipperError(IndexError):
    """
    Base class for the errors raised by Location.expect and
    Location.follow when a move or edit is impossible.
    """


class NoSuchChild(ZipperError):
    pass


class NoParent(ZipperError):
    pass


class NoRightSibling(ZipperError):
    pass


class NoLeftSibling(ZipperError):
    pass


class CannotInsertAtRoot(ZipperError):
    pass


class CannotDeleteAtRoot(ZipperError):
    pass


class NotASection(ZipperError):
    pass


class Top(Variant, namedtuple('Top', [])):
    """The path of a cursor sitting at the root. Falsy."""

    __slots__ = ()

    def __repr__(self):
        return 'TOP'


TOP = Top()


class Node(Variant, namedtuple('Node', ['left', 'right', 'parent_path'])):
    """
    The path of a cursor inside a section.

    left holds the siblings before the cursor in document order, so the
    nearest one is last. right holds the siblings after the cursor, the
    nearest one first. Section(left + (cursor,) + right) is the parent.
    """

    __slots__ = ()

    def __new__(cls, left=(), right=(), parent_path=TOP):
        return super().__new__(cls, tuple(left), tuple(right), parent_path)


# operation name -> error raised by Location.expect
_FAILURES = {
    'go_down': NoSuchChild,
    'get_nth': NoSuchChild,
    'go_up': NoParent,
    'go_right': NoRightSibling,
    'go_left': NoLeftSibling,
    'insert_left': CannotInsertAtRoot,
    'insert_right': CannotInsertAtRoot,
    'delete': CannotDeleteAtRoot,
    'insert_down': NotASection,
    'append_child': NotASection,
}

_MOVES = {
    'up': 'go_up',
    'down': 'go_down',
    'left': 'go_left',
    'right': 'go_right',
}


def zipper(tree):
    return Location.new(tree)


_Location = namedtuple('Location', ['cursor', 'path'])


class Location(Variant, _Location):

    __slots__ = ()

    def __new__(cls, cursor, path=TOP):
        return super().__new__(cls, cursor, path)

    @classmethod
    def new(cls, tree):
        return cls(tree, TOP)

    def __repr__(self):
        return 'Location(cursor={!r}, path={!r})'.format(*self)

    ## Context
    def node(self):
        return self.cursor

    def branch(self):
        return is_section(self.cursor)

    def children(self):
        if self.branch():
            return self.cursor.children

    def at_top(self):
        return not self.path

    def depth(self):
        """Number of sections enclosing the cursor."""
        n = 0
        path = self.path
        while path:
            n += 1
            path = path.parent_path
        return n

    ## Navigation
    def go_down(self):
        children = self.children()
        if children:
            return self._replace(
                cursor=children[0],
                path=Node((), children[1:], self.path),
            )

    def go_up(self):
        if self.path:
            left, right, parent_path = self.path
            return self._replace(
                cursor=Section(left + (self.cursor,) + right),
                path=parent_path,
            )

    def go_right(self):
        if self.path and self.path.right:
            left, right = self.path[:2]
            return self._replace(cursor=right[0], path=self.path._replace(
                left=left + (self.cursor,),
                right=right[1:],
            ))

    def go_left(self):
        if self.path and self.path.left:
            left, right = self.path[:2]
            return self._replace(cursor=left[-1], path=self.path._replace(
                left=left[:-1],
                right=(self.cursor,) + right,
            ))

    def get_nth(self, n):
        """
        Moves to the n-th child of the cursor. Same result as go_down
        followed by n go_right calls.
        """
        children = self.children()
        if children and 0 <= n < len(children):
            return self._replace(
                cursor=children[n],
                path=Node(children[:n], children[n + 1:], self.path),
            )

    def leftmost(self):
        """Returns the left most sibling at this location or self"""
        path = self.path
        if path:
            t = path.left + (self.cursor,) + path.right
            return self._replace(cursor=t[0], path=path._replace(
                left=(),
                right=t[1:],
            ))
        else:
            return self

    def rightmost(self):
        """Returns the right most sibling at this location or self"""
        path = self.path
        if path:
            t = path.left + (self.cursor,) + path.right
            return self._replace(cursor=t[-1], path=path._replace(
                left=t[:-1],
                right=(),
            ))
        else:
            return self

    def leftmost_descendant(self):
        loc = self
        while loc.branch():
            d = loc.go_down()
            if d:
                loc = d
            else:
                break
        return loc

    def rightmost_descendant(self):
        loc = self
        while loc.branch():
            d = loc.go_down()
            if d:
                loc = d.rightmost()
            else:
                break
        return loc

    def top(self):
        loc = self
        while loc.path:
            loc = loc.go_up()
        return loc

    def to_tree(self):
        """Collapses the zipper and returns the whole (edited) tree."""
        return self.top().cursor

    def ancestor(self, predicate):
        """
        Return the first ancestor above the current loc that
        matches predicate(ancestor), or None.

        The predicate is invoked with the location of each
        ancestor in turn, nearest first, until the top of the
        tree is reached.
        """
        u = self.go_up()
        while u:
            if predicate(u):
                return u
            u = u.go_up()

    def move_to(self, dest):
        """
        Move to the same 'position' in the tree as the given loc and return
        the loc that currently resides there, or None when the position no
        longer exists. The node found there may differ from dest's cursor
        if the tree was edited in between.
        """
        indexes = []
        path = dest.path
        while path:
            indexes.append(len(path.left))
            path = path.parent_path

        loc = self.top()
        for i in reversed(indexes):
            loc = loc.get_nth(i)
            if loc is None:
                return None
        return loc

    ## Editing
    def replace(self, tree):
        return self._replace(cursor=tree)

    def edit(self, f, *args):
        """Replace the node at this loc with the value of f(node, *args)"""
        return self.replace(f(self.cursor, *args))

    def insert_right(self, tree):
        """Insert tree as right sibling of the cursor without moving"""
        path = self.path
        if path:
            return self._replace(path=path._replace(right=(tree,) + path.right))

    def insert_left(self, tree):
        """Insert tree as left sibling of the cursor without moving"""
        path = self.path
        if path:
            return self._replace(path=path._replace(left=path.left + (tree,)))

    def insert_down(self, tree):
        """
        Inserts tree as the first child of the section at this loc and
        moves to it.
        """
        if self.branch():
            return self._replace(
                cursor=tree,
                path=Node((), self.cursor.children, self.path),
            )

    def append_child(self, tree):
        """
        Inserts tree as the last child of the section at this loc,
        without moving.
        """
        if self.branch():
            return self.replace(Section(self.cursor.children + (tree,)))

    def delete(self):
        """
        Removes the cursor. The new cursor is the nearest right sibling,
        else the nearest left sibling, else the parent section which is
        now empty.
        """
        path = self.path
        if not path:
            return None

        left, right, parent_path = path
        if right:
            return self._replace(
                cursor=right[0],
                path=path._replace(right=right[1:]),
            )
        elif left:
            return self._replace(
                cursor=left[-1],
                path=path._replace(left=left[:-1]),
            )
        else:
            return self._replace(cursor=Section(), path=parent_path)

    ## Enumeration
    def preorder_next(self):
        """
        Visit's nodes in depth-first pre-order.

        For example given the following tree:

                a
              /   \\
             b     e
             ^     ^
            c d   f g

        starting from a, preorder_next visits
        b, c, d, e, f, g and then returns None.
        """
        n = self.go_down() or self.go_right()
        if n is not None:
            return n

        u = self.go_up()
        while u:
            r = u.go_right()
            if r:
                return r
            u = u.go_up()

    def preorder_iter(self):
        loc = self
        while loc:
            yield loc
            loc = loc.preorder_next()

    def postorder_next(self):
        """
        Visit's nodes in depth-first post-order. Given the tree
        above the order is c, d, b, f, g, e, a.

        Note this method ends when it reaches the root node. To
        start traversal from the root call leftmost_descendant()
        first, as postorder_iter does.
        """
        r = self.go_right()
        if r:
            return r.leftmost_descendant()
        else:
            return self.go_up()

    def postorder_iter(self):
        loc = self.leftmost_descendant()
        while loc:
            yield loc
            loc = loc.postorder_next()

    def find(self, predicate):
        for loc in self.postorder_iter():
            if predicate(loc):
                return loc

    ## Strict variants
    def expect(self, op, *args):
        """
        Runs the named operation and raises its ZipperError instead of
        returning None, e.g. loc.expect('insert_right', tree).
        """
        if op not in _FAILURES:
            raise ValueError('Unknown operation: {!r}'.format(op))

        loc = getattr(self, op)(*args)
        if loc is None:
            raise _FAILURES[op](
                '{} is not possible at {!r}'.format(op, self.cursor),
            )
        return loc

    def follow(self, *moves):
        """
        Applies a sequence of 'up', 'down', 'left' and 'right' moves.
        Raises the matching ZipperError at the first impossible move.
        """
        loc = self
        for move in moves:
            if move not in _MOVES:
                raise ValueError('Unknown move: {!r}'.format(move))
            loc = loc.expect(_MOVES[move])
        return loc

    def with_memo(self):
        return MemoLocation(self)


del _Location
