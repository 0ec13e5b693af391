__author__ = 'kilian'

from abc import ABCMeta, abstractmethod


class Item(metaclass=ABCMeta):
    """
    The view of a chart item that constraints rely on. Decoders provide their own item classes;
    CKYItem is a minimal implementation.
    """

    @abstractmethod
    def label(self):
        """
        :rtype: str
        """
        pass

    @abstractmethod
    def start(self):
        """
        :rtype: int
        :return: index of the first word covered by the item
        """
        pass

    @abstractmethod
    def end(self):
        """
        :rtype: int
        :return: index of the last word covered by the item (inclusive)
        """
        pass

    @abstractmethod
    def is_preterminal(self):
        pass

    @abstractmethod
    def head_word(self):
        """
        :rtype: treebank.word.Word
        """
        pass

    @abstractmethod
    def head_child(self):
        """
        :rtype: Item | None
        """
        pass

    @abstractmethod
    def left_children(self):
        """
        :return: the modifiers left of the head child, in surface order (leftmost first)
        :rtype: list[Item]
        """
        pass

    @abstractmethod
    def right_children(self):
        """
        :return: the modifiers right of the head child, in surface order (leftmost first)
        :rtype: list[Item]
        """
        pass

    @abstractmethod
    def get_constraint(self):
        """
        :rtype: constraints.constraint.Constraint | None
        """
        pass

    @abstractmethod
    def set_constraint(self, constraint):
        pass


class CKYItem(Item):
    def __init__(self, label, start, end, head_word=None, head_child=None, left_children=None,
                 right_children=None, preterminal=False):
        """
        :type label: str
        :type start: int
        :type end: int
        :type head_word: treebank.word.Word
        :type head_child: CKYItem
        :type left_children: list[CKYItem]
        :type right_children: list[CKYItem]
        :type preterminal: bool
        """
        self.__label = label
        self.__start = start
        self.__end = end
        self.__head_word = head_word
        self.__head_child = head_child
        self.__left_children = list(left_children) if left_children is not None else []
        self.__right_children = list(right_children) if right_children is not None else []
        self.__preterminal = preterminal
        self.__constraint = None

    @staticmethod
    def preterminal(word, position):
        """
        :type word: treebank.word.Word
        :type position: int
        :rtype: CKYItem
        """
        return CKYItem(word.tag(), position, position, head_word=word, preterminal=True)

    @staticmethod
    def project(label, head_child):
        """
        Creates an item with the given label whose only child is head_child.

        :type label: str
        :type head_child: CKYItem
        :rtype: CKYItem
        """
        return CKYItem(label, head_child.start(), head_child.end(), head_word=head_child.head_word(),
                       head_child=head_child)

    def add_modifier(self, modifier):
        """
        :return: a new item that additionally has modifier as its outermost left or right child
        :type modifier: CKYItem
        :rtype: CKYItem
        """
        if modifier.end() + 1 == self.__start:
            return CKYItem(self.__label, modifier.start(), self.__end, self.__head_word, self.__head_child,
                           [modifier] + self.__left_children, self.__right_children)
        elif self.__end + 1 == modifier.start():
            return CKYItem(self.__label, self.__start, modifier.end(), self.__head_word, self.__head_child,
                           self.__left_children, self.__right_children + [modifier])
        else:
            raise ValueError("modifier " + str(modifier) + " is not adjacent to " + str(self))

    def label(self):
        return self.__label

    def start(self):
        return self.__start

    def end(self):
        return self.__end

    def is_preterminal(self):
        return self.__preterminal

    def head_word(self):
        return self.__head_word

    def head_child(self):
        return self.__head_child

    def left_children(self):
        return self.__left_children

    def right_children(self):
        return self.__right_children

    def get_constraint(self):
        return self.__constraint

    def set_constraint(self, constraint):
        self.__constraint = constraint

    def __str__(self):
        return self.__label + '[' + str(self.__start) + ',' + str(self.__end) + ']' \
               + ('' if self.__head_word is None else '(' + str(self.__head_word) + ')')

    def __repr__(self):
        return 'CKYItem(' + str(self) + ')'


__all__ = ["Item", "CKYItem"]
