"""
Reading of reference trees in bracketed notation, e.g. (S (NP (DT the) (NN dog)) (VP (VBD ran))).
Trees are represented as nltk.Tree objects whose labels are nonterminal symbols and whose leaves
are words.
"""
from __future__ import print_function

import nltk

__author__ = 'kilian'


class MalformedTreeError(ValueError):
    """
    Raised when a reference tree cannot be turned into constraints, e.g. because a node has no
    children, a word occurs where a subtree is expected, no head child can be determined, or a
    label cannot be parsed as a nonterminal.
    """
    pass


def read_tree(string):
    """
    :param string: a single tree in bracketed notation
    :type string: str
    :rtype: nltk.Tree
    :raises ValueError: if the string is ill-bracketed
    """
    tree = nltk.Tree.fromstring(string)
    # Penn treebank files wrap every sentence in an unlabelled bracket: ( (S ...) )
    while tree.label() == '' and len(tree) == 1 and isinstance(tree[0], nltk.Tree):
        tree = tree[0]
    return tree


def read_trees(stream):
    """
    Iterates over all trees in a text stream. A tree may span several lines.

    :param stream: file-like object or iterable of lines
    :rtype: collections.Iterable[nltk.Tree]
    """
    depth = 0
    buffer = []
    for line in stream:
        for char in line:
            if depth == 0 and char.isspace():
                continue
            if depth == 0 and char != '(':
                raise ValueError("expected '(' at top level, found " + repr(char))
            buffer.append(char)
            if char == '(':
                depth += 1
            elif char == ')':
                depth -= 1
                if depth == 0:
                    yield read_tree(''.join(buffer))
                    buffer = []
        if depth > 0:
            buffer.append(' ')
    if depth != 0:
        raise ValueError("ill-bracketed input: " + ''.join(buffer).strip())


def is_word(node):
    return isinstance(node, str)


def words(tree):
    """
    :type tree: nltk.Tree
    :rtype: list[str]
    """
    return tree.leaves()


__all__ = ["MalformedTreeError", "read_tree", "read_trees", "is_word", "words"]
