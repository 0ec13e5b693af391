#! /bin/python3
"""
Prints the constraint set of each tree in a treebank file (or stdin) and optionally checks that
replaying the tree against its own constraints satisfies every constraint.
"""
from __future__ import print_function

import sys
import plac
from constraints.constraint import ConstraintViolationError
from constraints.constraint_sets import ConstraintSets, ConstraintSettings, DEFAULT_CONSTRAINT_SET
from constraints.replay import replay_derivation, unsatisfied_constraints
from treebank.trees import MalformedTreeError, read_trees


def dump(stream, constraint_sets, replay=False, out=sys.stdout, log=sys.stderr):
    """
    :type constraint_sets: ConstraintSets
    :return: the number of trees for which reading, building or replaying the constraints failed
    :rtype: int
    """
    failures = 0
    sentence = 0
    try:
        for tree in read_trees(stream):
            if not _dump_sentence(sentence, tree, constraint_sets, replay, out, log):
                failures += 1
            sentence += 1
    except ValueError as error:
        # reading stops at the first ill-bracketed tree
        print("sentence", sentence, ": cannot read tree:", error, file=log)
        failures += 1
    return failures


def _dump_sentence(sentence, tree, constraint_sets, replay, out, log):
    """
    :return: False if building or replaying the constraints for tree failed
    :rtype: bool
    """
    try:
        constraint_set = constraint_sets.get(tree)
    except MalformedTreeError as error:
        print("sentence", sentence, ": cannot build constraints:", error, file=log)
        return False
    print(constraint_set, file=out)
    if not replay:
        return True
    try:
        replay_derivation(constraint_set, tree, constraint_sets.language_pack())
    except ConstraintViolationError as error:
        print("sentence", sentence, ": replay failed:", error, file=log)
        return False
    unsatisfied = unsatisfied_constraints(constraint_set)
    for constraint in unsatisfied:
        print("sentence", sentence, ": unsatisfied constraint", constraint, file=log)
    return not unsatisfied


@plac.annotations(
    treebank=('treebank file with one bracketed tree per sentence (default: stdin)', 'positional', None, str),
    constraint_set=('kind of constraint set', 'option', 'c', str),
    replay=('replay each tree against its constraints and report unsatisfied ones', 'flag', 'r')
    )
def main(treebank=None, constraint_set=DEFAULT_CONSTRAINT_SET, replay=False):
    constraint_sets = ConstraintSets(ConstraintSettings(constraint_set_factory=constraint_set))
    if treebank is None:
        failures = dump(sys.stdin, constraint_sets, replay)
    else:
        with open(treebank) as stream:
            failures = dump(stream, constraint_sets, replay)
    if failures:
        sys.exit(1)


if __name__ == '__main__':
    plac.call(main)
