"""
Deterministic replay of a reference tree against a constraint set: the chart items that a decoder
would build for the reference tree itself are created bottom-up and checked against the
constraints. Replaying the tree a constraint set was built from must succeed for every kind of
constraint set; afterwards every constraint has been satisfied.
"""
from __future__ import print_function

from constraints.constraint import ConstraintViolationError
from constraints.items import CKYItem
from treebank.trees import MalformedTreeError

__author__ = 'kilian'


def _head_index(tree, language_pack, n_children):
    head_idx = language_pack.head_finder().find_head(tree) - 1
    if not 0 <= head_idx < n_children:
        raise MalformedTreeError("no head child for " + str(tree))
    return head_idx


def replay_items(constraint_set, tree, language_pack):
    """
    Builds one complete item per node of tree, bottom-up, and assigns to each item the constraint
    returned by constraint_set.constraint_satisfying.

    :type constraint_set: constraints.constraint_set.ConstraintSet
    :type tree: nltk.Tree
    :type language_pack: treebank.language_pack.LanguagePack
    :return: the items in the order of their creation (the item for the root is last)
    :rtype: list[CKYItem]
    :raises ConstraintViolationError: if some item satisfies no constraint
    """
    items = []
    _replay_items_rec(constraint_set, tree, 0, language_pack, items)
    return items


def _replay_items_rec(constraint_set, tree, start, language_pack, items):
    treebank = language_pack.treebank()
    if treebank.is_preterminal(tree):
        item = CKYItem.preterminal(treebank.make_word(tree), start)
    else:
        children = []
        position = start
        for child in tree:
            child_item = _replay_items_rec(constraint_set, child, position, language_pack, items)
            children.append(child_item)
            position = child_item.end() + 1
        head_idx = _head_index(tree, language_pack, len(children))
        head = children[head_idx]
        item = CKYItem(tree.label(), start, position - 1, head_word=head.head_word(), head_child=head,
                       left_children=children[:head_idx], right_children=children[head_idx + 1:])

    constraint = constraint_set.constraint_satisfying(item)
    if constraint is None:
        raise ConstraintViolationError("no constraint satisfied by item " + str(item))
    item.set_constraint(constraint)
    items.append(item)
    return item


def replay_derivation(constraint_set, tree, language_pack):
    """
    Replays tree the way a head-outward CKY decoder uses a tree structured constraint set:
    preterminal items are looked up with constraint_satisfying, a head child is projected to the
    constraint its own constraint regards as parent (which must be locally satisfied), modifiers
    are attached one at a time unless they violate the constraint of the growing item, and the
    completed item must satisfy its constraint. Finally, the constraint of the root item must not
    have a parent other than the root of the constraint set.

    :type constraint_set: constraints.constraint_set.ConstraintSet
    :type tree: nltk.Tree
    :type language_pack: treebank.language_pack.LanguagePack
    :return: the completed items in the order of their creation (the item for the root is last)
    :rtype: list[CKYItem]
    :raises ConstraintViolationError: if some check fails
    """
    items = []
    root_item = _replay_derivation_rec(constraint_set, tree, 0, language_pack, items)
    parent = root_item.get_constraint().get_parent()
    if not (parent is None or parent is constraint_set.root()):
        raise ConstraintViolationError("constraint " + str(root_item.get_constraint())
                                       + " of sentence spanning item " + str(root_item) + " is incomplete")
    return items


def _replay_derivation_rec(constraint_set, tree, start, language_pack, items):
    treebank = language_pack.treebank()
    if treebank.is_preterminal(tree):
        item = CKYItem.preterminal(treebank.make_word(tree), start)
        constraint = constraint_set.constraint_satisfying(item)
        if constraint is None:
            raise ConstraintViolationError("no constraint satisfied by preterminal item " + str(item))
        item.set_constraint(constraint)
        items.append(item)
        return item

    children = []
    position = start
    for child in tree:
        child_item = _replay_derivation_rec(constraint_set, child, position, language_pack, items)
        children.append(child_item)
        position = child_item.end() + 1
    head_idx = _head_index(tree, language_pack, len(children))

    item = CKYItem.project(tree.label(), children[head_idx])
    constraint = children[head_idx].get_constraint().get_parent()
    if constraint is None or not constraint.is_locally_satisfied_by(item):
        raise ConstraintViolationError("constraint " + str(constraint) + " is not locally satisfied by " + str(item))
    item.set_constraint(constraint)

    # modifiers nearest to the head first, left side before right side
    modifiers = list(reversed(children[:head_idx])) + children[head_idx + 1:]
    for modifier in modifiers:
        if constraint.is_violated_by_child(modifier):
            raise ConstraintViolationError("constraint " + str(constraint) + " violated by child item "
                                           + str(modifier))
        item = item.add_modifier(modifier)
        item.set_constraint(constraint)

    if not constraint.is_satisfied_by(item):
        raise ConstraintViolationError("constraint " + str(constraint) + " is not satisfied by " + str(item))
    items.append(item)
    return item


def unsatisfied_constraints(constraint_set):
    """
    :type constraint_set: constraints.constraint_set.ConstraintSet
    :rtype: list[constraints.constraint.Constraint]
    """
    return [constraint for constraint in constraint_set if not constraint.has_been_satisfied()]


__all__ = ["replay_items", "replay_derivation", "unsatisfied_constraints"]
