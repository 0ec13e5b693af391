"""
Constraints that require the decoder to build exactly the reference tree. One constraint node is
built per node of the reference tree; the three kinds differ only in how an item is matched
locally against a node (see the matching strategies below):

    unlexicalized        labels must match (in canonical form)
    lexicalized          labels and head words must be equal
    partially lexicalized  labels, head word forms and head word tags must be equal
"""
from __future__ import print_function

import nltk
from constraints.constraint import Constraint
from treebank.trees import MalformedTreeError, is_word

__author__ = 'kilian'


class UnlexicalizedMatching:
    """
    Items match if their label equals the label of the constraint, possibly after
    canonicalization. Preterminal items always match: the decoder is expected to check them
    against the constraint for their position.
    """
    name = 'unlex'
    lexicalized = False
    canonical_labels = True

    def is_locally_satisfied_by(self, constraint, item):
        return item.label() == constraint.label() \
               or constraint.language_pack().treebank().get_canonical(item.label()) == constraint.label()

    def is_satisfied_by_preterminal(self, constraint, item):
        return True


class LexicalizedMatching:
    """
    Items match if label and head word are equal to those of the constraint. As the choice of
    part of speech tag matters once head words are compared, preterminal items also need to
    match locally and in their span.
    """
    name = 'lex'
    lexicalized = True
    canonical_labels = False

    def is_locally_satisfied_by(self, constraint, item):
        return item.label() == constraint.label() and item.head_word() == constraint.head_word()

    def is_satisfied_by_preterminal(self, constraint, item):
        return self.is_locally_satisfied_by(constraint, item) and constraint.span_matches(item)


class PartialLexicalizedMatching(LexicalizedMatching):
    """
    Like LexicalizedMatching, but only form and tag of the head words are compared, so that head
    words that carry further decoration (features, sense tags) still match.
    """
    name = 'partial-lex'

    def is_locally_satisfied_by(self, constraint, item):
        if item.label() != constraint.label():
            return False
        other = item.head_word()
        head_word = constraint.head_word()
        return other is not None and other.tag() == head_word.tag() and other.word() == head_word.word()


UNLEXICALIZED = UnlexicalizedMatching()
LEXICALIZED = LexicalizedMatching()
PARTIAL_LEXICALIZED = PartialLexicalizedMatching()


class TreeConstraint(Constraint):
    def __init__(self, tree, language_pack, matching=UNLEXICALIZED, parent=None, start=0):
        """
        Builds the constraint for tree and, recursively, for all its subtrees.

        :param tree: reference (sub)tree
        :type tree: nltk.Tree
        :type language_pack: treebank.language_pack.LanguagePack
        :param matching: one of UNLEXICALIZED, LEXICALIZED, PARTIAL_LEXICALIZED
        :param parent: the constraint of the parent node of tree
        :type parent: TreeConstraint
        :param start: the index of the first word of tree in the sentence
        :type start: int
        """
        if is_word(tree):
            raise MalformedTreeError("word " + repr(tree) + " where subtree expected")
        treebank = language_pack.treebank()
        self._language_pack = language_pack
        self._matching = matching
        self._parent = parent
        self._satisfied = False
        self._head_word = None

        if treebank.is_preterminal(tree):
            word = treebank.make_word(tree)
            self._leaf = True
            self._children = []
            self._label = word.tag()
            self._start = self._end = start
            if matching.lexicalized:
                self._head_word = word
        else:
            if len(tree) == 0:
                raise MalformedTreeError("empty right-hand side for " + tree.label())
            label = tree.label()
            if matching.canonical_labels and not treebank.is_base_np(label):
                label = treebank.get_canonical(label)
            self._leaf = False
            self._label = label
            self._start = start
            self._children = []
            position = start
            for child in tree:
                child_constraint = self.__class__(child, language_pack, matching, parent=self, start=position)
                self._children.append(child_constraint)
                position = child_constraint.end() + 1
            self._end = position - 1

            if matching.lexicalized:
                # inherit the head word from the head child
                head_idx = language_pack.head_finder().find_head(tree) - 1
                if not 0 <= head_idx < len(self._children):
                    raise MalformedTreeError("no head child for " + str(tree))
                self._head_word = self._children[head_idx].head_word()

    def is_leaf(self):
        return self._leaf

    def get_parent(self):
        return self._parent

    def get_children(self):
        """
        :rtype: list[TreeConstraint]
        """
        return self._children

    def label(self):
        return self._label

    def start(self):
        return self._start

    def end(self):
        return self._end

    def head_word(self):
        """
        :rtype: treebank.word.Word | None
        :return: the head word, None for unlexicalized constraints
        """
        return self._head_word

    def language_pack(self):
        return self._language_pack

    def matching(self):
        return self._matching

    def has_been_satisfied(self):
        return self._satisfied

    def is_locally_satisfied_by(self, item):
        return self._matching.is_locally_satisfied_by(self, item)

    def span_matches(self, item):
        return item.start() == self._start and item.end() == self._end

    def is_violated_by(self, item):
        raise NotImplementedError(self.__class__.__name__ + " does not support is_violated_by")

    def is_violated_by_child(self, child_item):
        child_constraint = child_item.get_constraint()
        return not (child_constraint is not None
                    and child_constraint.get_parent() is self
                    and any(child_constraint is child for child in self._children))

    def is_satisfied_by(self, item):
        # preterminal items are normally checked against the leaf constraint for their position,
        # see TreeStructuredConstraintSet.constraint_satisfying
        if item.is_preterminal():
            if self._matching.is_satisfied_by_preterminal(self, item):
                self._satisfied = True
                return True
            return False

        if not self.is_locally_satisfied_by(item) or not self.span_matches(item):
            return False

        left_children = item.left_children()
        right_children = item.right_children()
        if len(left_children) + len(right_children) + 1 != len(self._children):
            return False
        family = list(left_children) + [item.head_child()] + list(right_children)
        for child_item, child_constraint in zip(family, self._children):
            if child_item is None or child_item.get_constraint() is not child_constraint:
                return False

        self._satisfied = True
        return True

    def node_label(self):
        """
        :return: the label used in the bracketed rendering of the constraint tree
        :rtype: str
        """
        span = str(self._start) + '-' + str(self._end)
        if self._head_word is not None:
            return self._label + '-' + str(self._head_word) + '-' + span
        return self._label + '-' + span

    def to_tree(self):
        """
        :rtype: nltk.Tree
        """
        return nltk.Tree(self.node_label(), [child.to_tree() for child in self._children])

    def __str__(self):
        description = "label=" + self._label + ", span=(" + str(self._start) + "," + str(self._end) \
                      + "), parentLabel=" + ("null" if self._parent is None else self._parent.label())
        if self._head_word is not None:
            description = "headWord=" + str(self._head_word) + ", " + description
        return description


__all__ = ["TreeConstraint", "UnlexicalizedMatching", "LexicalizedMatching", "PartialLexicalizedMatching",
           "UNLEXICALIZED", "LEXICALIZED", "PARTIAL_LEXICALIZED"]
