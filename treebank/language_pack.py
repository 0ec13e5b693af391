from __future__ import print_function

import re
import nltk
from treebank.nonterminal import Nonterminal
from treebank.trees import MalformedTreeError, is_word
from treebank.word import Word

__author__ = 'kilian'


class Treebank:
    """
    Treebank specific predicates on trees and nonterminal labels: what counts as a preterminal,
    how labels decompose into base, augmentations and index, and which labels are considered
    equivalent (canonical labels).
    """
    def __init__(self, augmentation_delimiters='-=|', nonterminal_exceptions=(), base_np_label=None,
                 canonical_label_map=None):
        """
        :param augmentation_delimiters: characters that separate a base label from its augmentations
        :type augmentation_delimiters: str
        :param nonterminal_exceptions: labels that contain delimiters but are nonetheless atomic,
            e.g. -LRB- or -NONE-
        :type nonterminal_exceptions: collections.Iterable[str]
        :param base_np_label: label of base noun phrases, which are exempt from canonicalization
            in unlexicalized tree constraints
        :type base_np_label: str | None
        :param canonical_label_map: maps augmentation-free labels to their canonical form
        :type canonical_label_map: dict[str, str] | None
        """
        self.__delimiters = augmentation_delimiters
        self.__exceptions = tuple(nonterminal_exceptions)
        self.__base_np_label = base_np_label
        self.__canonical_map = dict(canonical_label_map) if canonical_label_map is not None else {}
        self.__delimiter_pattern = re.compile('([' + re.escape(augmentation_delimiters) + '])')

    def augmentation_delimiters(self):
        return self.__delimiters

    def is_preterminal(self, tree):
        """
        :rtype: bool
        :return: True iff tree is a subtree with exactly one child, which is a word
        """
        return isinstance(tree, nltk.Tree) and len(tree) == 1 and is_word(tree[0])

    def make_word(self, preterminal):
        """
        :type preterminal: nltk.Tree
        :rtype: Word
        """
        if not self.is_preterminal(preterminal):
            raise MalformedTreeError("not a preterminal: " + str(preterminal))
        return Word(preterminal[0], preterminal.label())

    def is_aug_delim(self, token):
        return len(token) == 1 and token in self.__delimiters

    def is_base_np(self, label):
        return self.__base_np_label is not None and label == self.__base_np_label

    def base_np_label(self):
        return self.__base_np_label

    def strip_augmentation(self, label):
        """
        :return: label with everything from the first augmentation delimiter onwards removed
        :rtype: str
        """
        for idx, char in enumerate(label):
            if idx > 0 and char in self.__delimiters:
                return label[:idx]
        return label

    def get_canonical(self, label):
        """
        :type label: str
        :rtype: str
        """
        if label in self.__exceptions:
            return label
        stripped = self.strip_augmentation(label)
        return self.__canonical_map.get(stripped, stripped)

    def parse_nonterminal(self, label):
        """
        Decomposes a label into base, augmentations (delimiters included) and index.
        The index, if present, is the final all-digit augmentation.

        :type label: str
        :rtype: Nonterminal
        :raises MalformedTreeError: if label is not a non-empty string
        """
        if not isinstance(label, str) or label == '':
            raise MalformedTreeError("cannot parse nonterminal label " + repr(label))

        base = None
        rest = label
        for exception in self.__exceptions:
            if label.startswith(exception):
                base = exception
                rest = label[len(exception):]
                if rest == '':
                    return Nonterminal(base)
                break

        if base is None and self.__delimiter_pattern.search(label) is None:
            return Nonterminal(label)

        tokens = [token for token in self.__delimiter_pattern.split(rest) if token != '']
        if base is None:
            base = tokens[0]
            tokens = tokens[1:]

        index = -1
        if tokens and tokens[-1].isdigit():
            index = int(tokens[-1])
            tokens = tokens[:-1]
        return Nonterminal(base, tokens, index)


class LanguagePack:
    """
    Bundles the treebank predicates and the head finder of one language. A language pack is
    passed explicitly to everything that builds or checks constraints, so that constraint sets
    of different languages can coexist.
    """
    def __init__(self, name, treebank, head_finder):
        """
        :type name: str
        :type treebank: Treebank
        :type head_finder: treebank.head_finder.HeadFinder
        """
        self.__name = name
        self.__treebank = treebank
        self.__head_finder = head_finder

    def name(self):
        return self.__name

    def treebank(self):
        """
        :rtype: Treebank
        """
        return self.__treebank

    def head_finder(self):
        """
        :rtype: treebank.head_finder.HeadFinder
        """
        return self.__head_finder

    def __str__(self):
        return self.__name


__all__ = ["Treebank", "LanguagePack"]
