__author__ = 'kilian'

KLEENE_STAR = '*'


class Nonterminal:
    """
    Decomposition of a (possibly complex) nonterminal label such as NP-SBJ-1 into its base
    label, its augmentations and its index. Augmentation delimiters are kept as separate tokens
    in the augmentation sequence, i.e. NP-SBJ-1 has base NP, augmentations ('-', 'SBJ', '-') and
    index 1. A nonterminal without index has index -1.
    """
    def __init__(self, base, augmentations=(), index=-1):
        """
        :type base: str
        :type augmentations: tuple[str]
        :type index: int
        """
        self.__base = base
        self.__augmentations = tuple(augmentations)
        self.__index = index

    def base(self):
        return self.__base

    def augmentations(self):
        return self.__augmentations

    def index(self):
        return self.__index

    def subsumes(self, other, treebank):
        """
        :param other: the more specific nonterminal
        :type other: Nonterminal
        :param treebank: provides canonical labels and augmentation delimiters
        :type treebank: treebank.language_pack.Treebank
        :return: True iff the canonical base of this nonterminal is * or equals the canonical base
            of other, and every augmentation of this nonterminal is also an augmentation of other.
            Indices are not compared.
        :rtype: bool
        """
        this_base = treebank.get_canonical(self.__base)
        if this_base != KLEENE_STAR and this_base != treebank.get_canonical(other.base()):
            return False
        for aug in self.__augmentations:
            if not treebank.is_aug_delim(aug) and aug not in other.augmentations():
                return False
        return True

    def to_symbol(self):
        return str(self)

    def __eq__(self, other):
        return isinstance(other, Nonterminal) \
               and (self.__base, self.__augmentations, self.__index) \
               == (other.base(), other.augmentations(), other.index())

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.__base, self.__augmentations, self.__index))

    def __str__(self):
        if self.__base is None:
            return 'null'
        label = self.__base + ''.join(self.__augmentations)
        if self.__index != -1:
            label += str(self.__index)
        return label

    def __repr__(self):
        return 'Nonterminal(' + ', '.join(map(repr, [self.__base, self.__augmentations, self.__index])) + ')'


__all__ = ["Nonterminal", "KLEENE_STAR"]
