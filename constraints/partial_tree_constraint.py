"""
Bracket constraints: the reference tree is read as a set of brackets that the decoder's
derivation has to contain, while additional (unbracketed) constituents may be built in between.

Each node goes through the states unsatisfied -> satisfied -> fully satisfied. A node is satisfied
as soon as some item lies within its span, and fully satisfied once an item with exactly its span
and a subsumed label has been built over fully satisfied children. Until a node is fully
satisfied, items are attached to the node itself rather than to its parent.
"""
from __future__ import print_function

import nltk
from constraints.constraint import Constraint
from treebank.trees import MalformedTreeError, is_word

__author__ = 'kilian'

ROOT_LABEL = '*ROOT*'


class PartialTreeConstraint(Constraint):
    def __init__(self, tree, language_pack, parent=None, start=0):
        """
        :param tree: reference (sub)tree
        :type tree: nltk.Tree
        :type language_pack: treebank.language_pack.LanguagePack
        :type parent: PartialTreeConstraint
        :param start: the index of the first word of tree in the sentence
        :type start: int
        """
        self._language_pack = language_pack
        self._parent = parent
        self._satisfied = False
        self._fully_satisfied = False
        if tree is None:
            # used by RootConstraint
            return

        if is_word(tree):
            raise MalformedTreeError("word " + repr(tree) + " where subtree expected")
        treebank = language_pack.treebank()
        if treebank.is_preterminal(tree):
            self._label = treebank.make_word(tree).tag()
            self._nonterminal = treebank.parse_nonterminal(self._label)
            self._children = []
            self._start = self._end = start
        else:
            if len(tree) == 0:
                raise MalformedTreeError("empty right-hand side for " + tree.label())
            self._label = tree.label()
            self._nonterminal = treebank.parse_nonterminal(self._label)
            self._start = start
            self._children = []
            position = start
            for child in tree:
                child_constraint = PartialTreeConstraint(child, language_pack, parent=self, start=position)
                self._children.append(child_constraint)
                position = child_constraint.end() + 1
            self._end = position - 1

    def is_leaf(self):
        return len(self._children) == 0

    def get_parent(self):
        return self._parent if self._fully_satisfied else self

    def get_children(self):
        """
        :rtype: list[PartialTreeConstraint]
        """
        return self._children

    def label(self):
        return self._label

    def language_pack(self):
        return self._language_pack

    def nonterminal(self):
        """
        :rtype: treebank.nonterminal.Nonterminal
        """
        return self._nonterminal

    def start(self):
        return self._start

    def end(self):
        return self._end

    def has_been_satisfied(self):
        return self._satisfied

    def is_fully_satisfied(self):
        return self._fully_satisfied

    def is_violated_by(self, item):
        raise NotImplementedError(self.__class__.__name__ + " does not support is_violated_by")

    def is_violated_by_child(self, child_item):
        if not self.span_ok(child_item):
            return True
        # a child item that spans exactly the bracket of its constraint must complete that bracket
        child_constraint = child_item.get_constraint()
        if child_constraint is not None and child_constraint.span_matches(child_item):
            return not child_constraint.is_fully_satisfied()
        return False

    def is_satisfied_by(self, item):
        # preterminal items are normally checked against the leaf constraint for their position,
        # see PartialTreeConstraintSet.constraint_satisfying
        if item.is_preterminal():
            self._satisfied = True
            self._fully_satisfied = True
            return True

        if not self.is_locally_satisfied_by(item):
            return False

        self._satisfied = True
        if self.span_matches(item) and self.label_matches(item) and self.__children_fully_satisfied():
            self._fully_satisfied = True
        return True

    def __children_fully_satisfied(self):
        return all(child.is_fully_satisfied() for child in self._children)

    def is_locally_satisfied_by(self, item):
        return self.span_ok(item)

    def span_ok(self, item):
        return item.start() >= self._start and item.end() <= self._end

    def span_matches(self, item):
        return item.start() == self._start and item.end() == self._end

    def label_matches(self, item):
        treebank = self._language_pack.treebank()
        return self._nonterminal.subsumes(treebank.parse_nonterminal(item.label()), treebank)

    def node_label(self):
        return self._label + '-' + str(self._start) + '-' + str(self._end)

    def to_tree(self):
        """
        :rtype: nltk.Tree
        """
        return nltk.Tree(self.node_label(), [child.to_tree() for child in self._children])

    def __str__(self):
        return "label=" + self._label + ", span=(" + str(self._start) + "," + str(self._end) \
               + "), parentLabel=" + ("null" if self._parent is None else self._parent.label()) \
               + ", sat=" + str(self._satisfied).lower() + ", fullySat=" + str(self._fully_satisfied).lower()


class RootConstraint(PartialTreeConstraint):
    """
    Synthetic ancestor of the constraint for the observed root. It is satisfied from the start
    and never becomes fully satisfied, so that the parent of a fully satisfied observed root
    always exists.
    """
    def __init__(self, observed_root):
        """
        :type observed_root: PartialTreeConstraint
        """
        super(RootConstraint, self).__init__(None, observed_root.language_pack())
        self._label = ROOT_LABEL
        self._nonterminal = None
        self._children = [observed_root]
        self._start = observed_root.start()
        self._end = observed_root.end()
        self._satisfied = True
        observed_root._parent = self

    def is_leaf(self):
        return False

    def is_violated_by_child(self, child_item):
        return False

    def is_violated_by(self, item):
        return False

    def is_satisfied_by(self, item):
        return True

    def is_locally_satisfied_by(self, item):
        return True


__all__ = ["PartialTreeConstraint", "RootConstraint", "ROOT_LABEL"]
