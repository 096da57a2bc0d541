from ._lib.memo import MemoLocation
from ._lib.tree import (
    Item, Section, Tree, from_nested, is_item, is_section, is_tree, to_nested,
)
from ._lib.zipper import (
    TOP, CannotDeleteAtRoot, CannotInsertAtRoot, Location, Node, NoLeftSibling,
    NoParent, NoRightSibling, NoSuchChild, NotASection, Top, ZipperError,
    zipper,
)

__all__ = [
    'CannotDeleteAtRoot',
    'CannotInsertAtRoot',
    'Item',
    'Location',
    'MemoLocation',
    'Node',
    'NoLeftSibling',
    'NoParent',
    'NoRightSibling',
    'NoSuchChild',
    'NotASection',
    'Section',
    'TOP',
    'Top',
    'Tree',
    'ZipperError',
    'from_nested',
    'is_item',
    'is_section',
    'is_tree',
    'to_nested',
    'zipper',
]
