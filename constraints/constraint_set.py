__author__ = 'kilian'

from abc import ABCMeta, abstractmethod
from constraints.partial_tree_constraint import PartialTreeConstraint, RootConstraint
from constraints.tree_constraint import TreeConstraint, UNLEXICALIZED, LEXICALIZED, PARTIAL_LEXICALIZED


class ConstraintSet(metaclass=ABCMeta):
    """
    The constraints for one sentence. A constraint set is a collection of constraints; the
    predicates below tell the decoder how to use it.
    """

    @abstractmethod
    def has_tree_structure(self):
        """
        :rtype: bool
        :return: True iff the constraints form a tree (see Constraint.get_parent)
        """
        pass

    @abstractmethod
    def find_at_least_one_satisfying(self):
        """
        :rtype: bool
        :return: True iff every chart item needs to satisfy some constraint of this set
        """
        pass

    @abstractmethod
    def find_no_violations(self):
        """
        :rtype: bool
        :return: True iff chart items must not violate any constraint of this set
        """
        pass

    @abstractmethod
    def constraint_satisfying(self, item):
        """
        :type item: constraints.items.Item
        :return: a constraint satisfied by item or None
        :rtype: constraints.constraint.Constraint | None
        """
        pass

    @abstractmethod
    def is_violated_by(self, item):
        """
        :type item: constraints.items.Item
        :rtype: bool
        """
        pass

    @abstractmethod
    def root(self):
        """
        :rtype: constraints.constraint.Constraint | None
        """
        pass

    @abstractmethod
    def leaves(self):
        """
        :return: the leaf constraints, one per word, in sentence order
        :rtype: list[constraints.constraint.Constraint]
        """
        pass

    @abstractmethod
    def __iter__(self):
        pass

    @abstractmethod
    def __len__(self):
        pass


class TreeStructuredConstraintSet(ConstraintSet):
    """
    Common implementation of constraint sets whose constraints form a tree isomorphic to a
    reference tree. Subclasses implement build_root.
    """
    def __init__(self, tree=None, language_pack=None):
        """
        :param tree: the reference tree; if None, the constraint set is empty
        :type tree: nltk.Tree
        :type language_pack: treebank.language_pack.LanguagePack
        """
        self._root = None
        self._nodes = []
        self._leaves = []
        if tree is not None:
            if language_pack is None:
                raise ValueError("a language pack is required to build constraints")
            self._root = self.build_root(tree, language_pack)
            self.__collect_nodes(self._root)

    @abstractmethod
    def build_root(self, tree, language_pack):
        pass

    def __collect_nodes(self, root):
        # depth-first, left to right, so that leaves end up in sentence order
        agenda = [root]
        while agenda:
            node = agenda.pop()
            self._nodes.append(node)
            if node.is_leaf():
                self._leaves.append(node)
            else:
                agenda.extend(reversed(node.get_children()))

    def has_tree_structure(self):
        return True

    def find_at_least_one_satisfying(self):
        return True

    def find_no_violations(self):
        return False

    def root(self):
        return self._root

    def leaves(self):
        return self._leaves

    def is_violated_by(self, item):
        raise NotImplementedError(self.__class__.__name__ + " does not support is_violated_by")

    def constraint_satisfying(self, item):
        if item.is_preterminal():
            if not 0 <= item.start() < len(self._leaves):
                return None
            constraint = self._leaves[item.start()]
            return constraint if constraint.is_satisfied_by(item) else None

        # items are licensed by what the constraint of their head child regards as its parent
        head_child = item.head_child()
        if head_child is None or head_child.get_constraint() is None:
            return None
        head_child_constraint = head_child.get_constraint()
        head_child_constraint_parent = head_child_constraint.get_parent()
        if head_child_constraint_parent is None:
            return None
        return head_child_constraint_parent if head_child_constraint_parent.is_satisfied_by(item) else None

    def to_tree(self):
        """
        :rtype: nltk.Tree | None
        """
        return None if self._root is None else self._root.to_tree()

    def __iter__(self):
        return iter(self._nodes)

    def __len__(self):
        return len(self._nodes)

    def __str__(self):
        return '()' if self._root is None else _bracketed(self._root)


def _bracketed(constraint):
    # childless nodes print as (label)
    return '(' + ' '.join([constraint.node_label()] + [_bracketed(child) for child in constraint.get_children()]) + ')'


class UnlexTreeConstraintSet(TreeStructuredConstraintSet):
    """
    Requires the decoder to build exactly the reference tree, comparing labels only.
    """
    matching = UNLEXICALIZED

    def build_root(self, tree, language_pack):
        return TreeConstraint(tree, language_pack, self.matching)


class LexTreeConstraintSet(UnlexTreeConstraintSet):
    """
    Requires the decoder to build exactly the reference tree, comparing labels and head words.
    """
    matching = LEXICALIZED


class PartialLexTreeConstraintSet(UnlexTreeConstraintSet):
    """
    Requires the decoder to build exactly the reference tree, comparing labels and the forms
    and tags of head words.
    """
    matching = PARTIAL_LEXICALIZED


class PartialTreeConstraintSet(TreeStructuredConstraintSet):
    """
    Requires the decoder's derivation to contain every bracket of the reference tree. The
    root of the set is a synthetic RootConstraint above the constraint for the observed root.
    """
    def build_root(self, tree, language_pack):
        return RootConstraint(PartialTreeConstraint(tree, language_pack))


__all__ = ["ConstraintSet", "TreeStructuredConstraintSet", "UnlexTreeConstraintSet", "LexTreeConstraintSet",
           "PartialLexTreeConstraintSet", "PartialTreeConstraintSet"]
