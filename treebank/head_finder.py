from __future__ import print_function

import sys
import nltk
from treebank.nonterminal import KLEENE_STAR
from treebank.trees import MalformedTreeError, is_word

__author__ = 'kilian'

LEFT = 'l'
RIGHT = 'r'


class HeadFindInstruction:
    def __init__(self, direction, scan_set):
        """
        :param direction: 'l' to scan the children from left to right, 'r' from right to left
        :type direction: str
        :type scan_set: tuple[str]
        """
        self.direction = direction
        self.scan_set = tuple(scan_set)

    def __str__(self):
        return '(' + ' '.join([self.direction] + list(self.scan_set)) + ')'


def read_head_table(head_table):
    """
    Reads a head table in lisp notation, e.g.
    ((S (l TO IN VP S SBAR)) (NP (r NN NNS) (l NP) (r)) (* (l)))
    where each entry lists the head-finding instructions for one parent label.
    The entry for * is the default rule.

    :param head_table: the head table as string or as already parsed nltk.Tree
    :rtype: dict[str, list[HeadFindInstruction]]
    """
    if isinstance(head_table, str):
        head_table = nltk.Tree.fromstring(head_table)
    if not isinstance(head_table, nltk.Tree):
        raise ValueError("non-list head table")
    instructions = {}
    for entry in head_table:
        if is_word(entry):
            raise ValueError("head table entry is not a list: " + entry)
        entry_instructions = []
        for instruction in entry:
            if is_word(instruction) or instruction.label() not in [LEFT, RIGHT]:
                raise ValueError("malformed head-finding instruction in entry for " + entry.label())
            entry_instructions.append(HeadFindInstruction(instruction.label(), instruction.leaves()))
        instructions[entry.label()] = entry_instructions
    return instructions


class HeadFinder:
    """
    Table driven head finder in the style of Magerman and Collins. For a production lhs -> rhs,
    the instructions for lhs are tried in order: an instruction scans the children in its
    direction and picks the first child whose label matches a label of its scan set. An instruction
    with an empty scan set picks the first child in its direction. If every instruction fails, the
    direction of the last instruction decides.
    """
    def __init__(self, treebank, head_table, warn_default_rule=False, log=sys.stderr):
        """
        :type treebank: treebank.language_pack.Treebank
        :param head_table: head table in lisp notation, see read_head_table
        :param warn_default_rule: print a warning whenever the default rule is used
        :type warn_default_rule: bool
        :param log: stream for warnings
        """
        self.__treebank = treebank
        self.__instructions = read_head_table(head_table)
        self.__warn_default_rule = warn_default_rule
        self.__log = log

    def instructions(self, lhs):
        """
        :rtype: list[HeadFindInstruction] | None
        """
        if lhs in self.__instructions:
            return self.__instructions[lhs]
        canonical = self.__treebank.get_canonical(lhs)
        if canonical in self.__instructions:
            return self.__instructions[canonical]
        return None

    def find_head(self, tree):
        """
        :param tree: an interior (non-preterminal) node
        :type tree: nltk.Tree
        :return: the 1-based index of the head child of tree
        :rtype: int
        """
        rhs = []
        for child in tree:
            if is_word(child):
                raise MalformedTreeError("word " + repr(child) + " where subtree expected in " + str(tree))
            rhs.append(child.label())
        return self.find_head_of_production(tree.label(), rhs)

    def find_head_of_production(self, lhs, rhs):
        """
        :type lhs: str
        :type rhs: list[str]
        :return: the 1-based index of the head child in rhs
        :rtype: int
        """
        if len(rhs) == 0:
            raise MalformedTreeError("cannot find head of empty right-hand side of " + lhs)

        instructions = self.instructions(lhs)
        if instructions is None:
            if self.__warn_default_rule:
                print(self.__class__.__name__ + ": warning: couldn't find rule for", lhs, "->", ' '.join(rhs),
                      file=self.__log)
            instructions = self.__instructions.get(KLEENE_STAR)
            if instructions is None:
                raise MalformedTreeError("couldn't find rule for " + lhs + " -> " + ' '.join(rhs)
                                         + " and there is no default rule")

        head_idx = -1
        direction = RIGHT
        for instruction in instructions:
            direction = instruction.direction
            if len(instruction.scan_set) == 0:
                head_idx = 0 if direction == LEFT else len(rhs) - 1
                break
            head_idx = self.__scan(direction, rhs, instruction.scan_set)
            if head_idx >= 0:
                break
        if head_idx < 0:
            head_idx = 0 if direction == LEFT else len(rhs) - 1
        return head_idx + 1

    def __scan(self, direction, rhs, scan_set):
        positions = range(len(rhs)) if direction == LEFT else range(len(rhs) - 1, -1, -1)
        for idx in positions:
            if self.__tag_matches(rhs[idx], scan_set):
                return idx
        return -1

    def __tag_matches(self, tag, scan_set):
        tag_nt = None
        for match_tag in scan_set:
            if tag == match_tag:
                return True
            if tag_nt is None:
                tag_nt = self.__treebank.parse_nonterminal(tag)
            if self.__treebank.parse_nonterminal(match_tag).subsumes(tag_nt, self.__treebank):
                return True
        return False

    def __str__(self):
        return '(' + ' '.join(['(' + lhs + ' ' + ' '.join(map(str, instructions)) + ')'
                               for lhs, instructions in sorted(self.__instructions.items())]) + ')'


__all__ = ["HeadFinder", "HeadFindInstruction", "read_head_table", "LEFT", "RIGHT"]
