import pytest

from the_zipper import (
    TOP, Item, Location, Node, Section, Top, from_nested, is_item, is_section,
    is_tree, to_nested,
)


def test_structural_equality():
    assert Item('a') == Item('a')
    assert Item('a') != Item('b')
    assert Section([Item('a')]) == Section((Item('a'),))
    assert Section() == Section([])


def test_variants_never_compare_equal():
    # both are the tuple (('x',),) underneath
    assert Item(('x',)) != Section(('x',))
    assert Item('a') != ('a',)
    assert TOP != Node()


def test_section_children_are_a_tuple():
    children = [Item('a')]
    s = Section(children)
    children.append(Item('b'))

    assert s.children == (Item('a'),)


def test_hashable():
    assert hash(Section([Item('a')])) == hash(Section([Item('a')]))
    assert len({Item('a'), Item('a'), Section(), Section()}) == 2
    assert {Location.new(Item('a')): 1}[Location(Item('a'), TOP)] == 1


def test_top_is_falsy():
    assert not TOP
    assert TOP == Top()
    assert Node()
    assert Node() == Node((), (), TOP)


def test_repr():
    assert repr(Section([Item('a')])) == "Section([Item('a')])"
    assert repr(Location.new(Item(1))) == 'Location(cursor=Item(1), path=TOP)'


def test_predicates():
    assert is_item(Item('a'))
    assert not is_item(Section())
    assert is_section(Section())
    assert is_tree(Item('a')) and is_tree(Section())
    assert not is_tree(('a',))
    assert is_item.__name__ == 'is_item'


def test_from_nested():
    assert from_nested(['a', ['+', 'b'], []]) == Section([
        Item('a'),
        Section([Item('+'), Item('b')]),
        Section(),
    ])
    assert from_nested(('a', 'b')) == Section([Item('a'), Item('b')])
    assert from_nested('a') == Item('a')
    assert from_nested({'k': 'v'}) == Item({'k': 'v'})


def test_from_nested_keeps_trees():
    leaf = Item([1, 2])
    assert from_nested(leaf) is leaf
    assert from_nested([leaf]) == Section([leaf])


def test_to_nested():
    value = ['a', ['+', 'b'], []]
    assert to_nested(from_nested(value)) == value
    assert to_nested(Item(3)) == 3


def test_to_nested_rejects_non_trees():
    with pytest.raises(ValueError):
        to_nested(['a'])
