__author__ = 'kilian'

from abc import ABCMeta, abstractmethod


class ConstraintViolationError(Exception):
    """
    Raised by drivers that require every chart item of a derivation to be licensed by the
    constraint set, see constraints.replay.
    """
    pass


class Constraint(metaclass=ABCMeta):
    """
    A single constraint of a constraint set, against which chart items are checked while
    decoding. Constraints of tree structured constraint sets form a tree: every constraint
    knows its parent.
    """

    @abstractmethod
    def is_leaf(self):
        """
        :rtype: bool
        :return: True iff this constraint has no children
        """
        pass

    @abstractmethod
    def get_parent(self):
        """
        :rtype: Constraint | None
        :return: the constraint that items built on top of an item satisfying this constraint
            must satisfy
        """
        pass

    @abstractmethod
    def is_satisfied_by(self, item):
        """
        Checks item against this constraint and records whether the constraint has been satisfied.

        :type item: constraints.items.Item
        :rtype: bool
        """
        pass

    @abstractmethod
    def has_been_satisfied(self):
        """
        :rtype: bool
        :return: True iff is_satisfied_by has returned True at least once
        """
        pass

    @abstractmethod
    def is_locally_satisfied_by(self, item):
        """
        Checks only the properties of item itself, not those of its children.

        :type item: constraints.items.Item
        :rtype: bool
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
    def is_violated_by_child(self, child_item):
        """
        :param child_item: an item that is about to be attached as child to an item to which this
            constraint is assigned
        :type child_item: constraints.items.Item
        :rtype: bool
        """
        pass


class AbstractConstraint(Constraint):
    """
    Convenience base class: every operation signals that it is not supported.
    Subclasses override the operations they support.
    """

    def is_leaf(self):
        raise NotImplementedError(self.__class__.__name__ + " does not support is_leaf")

    def get_parent(self):
        raise NotImplementedError(self.__class__.__name__ + " does not support get_parent")

    def is_satisfied_by(self, item):
        raise NotImplementedError(self.__class__.__name__ + " does not support is_satisfied_by")

    def has_been_satisfied(self):
        raise NotImplementedError(self.__class__.__name__ + " does not support has_been_satisfied")

    def is_locally_satisfied_by(self, item):
        raise NotImplementedError(self.__class__.__name__ + " does not support is_locally_satisfied_by")

    def is_violated_by(self, item):
        raise NotImplementedError(self.__class__.__name__ + " does not support is_violated_by")

    def is_violated_by_child(self, child_item):
        raise NotImplementedError(self.__class__.__name__ + " does not support is_violated_by_child")


__all__ = ["Constraint", "AbstractConstraint", "ConstraintViolationError"]
