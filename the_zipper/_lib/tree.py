from collections import namedtuple


class Variant:
    """
    Mixin for namedtuple based sum types.

    Plain namedtuples compare equal to any tuple with the same items, so
    Item(('a',)) == Section(('a',)) would hold. Variants only compare equal
    to instances of the same class.
    """

    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__,) + tuple(self))


def isa(type):
    """
    Returns is_<type>(obj) a function that returns true
    when it's argument is an instance of type
    """
    def f(obj):
        return isinstance(obj, type)

    f.__name__ = 'is_{0}'.format(type.__name__.lower())
    return f


class Item(Variant, namedtuple('Item', ['value'])):
    """A leaf holding an arbitrary value."""

    __slots__ = ()

    def __repr__(self):
        return 'Item({!r})'.format(self.value)


class Section(Variant, namedtuple('Section', ['children'])):
    """
    An ordered group of trees.

    Children are always stored as a tuple, whatever iterable was passed in.

    >>> Section([Item('a'), Item('b')]).children
    (Item('a'), Item('b'))

    """

    __slots__ = ()

    def __new__(cls, children=()):
        return super().__new__(cls, tuple(children))

    def __repr__(self):
        return 'Section([{}])'.format(', '.join(map(repr, self.children)))


Tree = (Item, Section)

is_item = isa(Item)
is_section = isa(Section)


def is_tree(obj):
    return isinstance(obj, Tree)


def _is_nested(obj):
    return isinstance(obj, (list, tuple)) and not is_tree(obj)


# object -> Tree
def from_nested(obj):
    """
    Builds a tree from nested lists. Lists and tuples become sections,
    trees are kept as they are and everything else becomes an item.

    >>> from_nested(['a', ['+', 'b']])
    Section([Item('a'), Section([Item('+'), Item('b')])])

    """
    if is_tree(obj):
        return obj
    if _is_nested(obj):
        return Section(from_nested(child) for child in obj)
    return Item(obj)


# Tree -> object
def to_nested(tree):
    """
    Inverse of from_nested: sections become lists, items their values.

    Items whose value is itself a list will come back from from_nested
    as sections, not items.
    """
    if is_section(tree):
        return [to_nested(child) for child in tree.children]
    if is_item(tree):
        return tree.value
    raise ValueError('Not a tree: {!r}'.format(tree))
