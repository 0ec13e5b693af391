"""
Predicates and head rules for the English Penn Treebank.
"""
from __future__ import print_function

import sys
from treebank.head_finder import HeadFinder
from treebank.language_pack import LanguagePack, Treebank

__author__ = 'kilian'

AUGMENTATION_DELIMITERS = '-=|'

NONTERMINAL_EXCEPTIONS = ('-LRB-', '-RRB-', '-LCB-', '-RCB-', '-NONE-')

BASE_NP = 'NPB'

CANONICAL_LABEL_MAP = {
    BASE_NP: 'NP',
    'SG': 'S',
}

# Head rules of Collins (1999), appendix A. A scan set matches the first child (in scan direction)
# whose label is in the set, so priority lists are written as one instruction per label.
HEAD_RULES = """
(
 (ADJP (l NNS) (l QP) (l NN) (l $) (l ADVP) (l JJ) (l VBN) (l VBG) (l ADJP) (l JJR) (l NP) (l JJS) (l DT)
       (l FW) (l RBR) (l RBS) (l SBAR) (l RB))
 (ADVP (r RB) (r RBR) (r RBS) (r FW) (r ADVP) (r TO) (r CD) (r JJR) (r JJ) (r IN) (r NP) (r JJS) (r NN))
 (CONJP (r CC) (r RB) (r IN))
 (FRAG (r))
 (INTJ (l))
 (LST (r LS) (r :))
 (NAC (l NN) (l NNS) (l NNP) (l NNPS) (l NP) (l NAC) (l EX) (l $) (l CD) (l QP) (l PRP) (l VBG) (l JJ) (l JJS)
      (l JJR) (l ADJP) (l FW))
 (NP (r POS NN NNP NNPS NNS NX JJR) (l NP) (r $ ADJP PRN) (r CD) (r JJ JJS RB QP) (r))
 (NX (r POS NN NNP NNPS NNS NX JJR) (l NP) (r $ ADJP PRN) (r CD) (r JJ JJS RB QP) (r))
 (PP (r IN) (r TO) (r VBG) (r VBN) (r RP) (r FW))
 (PRN (l))
 (PRT (r RP))
 (QP (l $) (l IN) (l NNS) (l NN) (l JJ) (l RB) (l DT) (l CD) (l NCD) (l QP) (l JJR) (l JJS))
 (RRC (r VP) (r NP) (r ADVP) (r ADJP) (r PP))
 (S (l TO) (l IN) (l VP) (l S) (l SBAR) (l ADJP) (l UCP) (l NP))
 (SBAR (l WHNP) (l WHPP) (l WHADVP) (l WHADJP) (l IN) (l DT) (l S) (l SQ) (l SINV) (l SBAR) (l FRAG))
 (SBARQ (l SQ) (l S) (l SINV) (l SBARQ) (l FRAG))
 (SINV (l VBZ) (l VBD) (l VBP) (l VB) (l MD) (l VP) (l S) (l SINV) (l ADJP) (l NP))
 (SQ (l VBZ) (l VBD) (l VBP) (l VB) (l MD) (l VP) (l SQ))
 (UCP (r))
 (VP (l TO) (l VBD) (l VBN) (l MD) (l VBZ) (l VB) (l VBG) (l VBP) (l VP) (l ADJP) (l NN) (l NNS) (l NP))
 (WHADJP (l CC) (l WRB) (l JJ) (l ADJP))
 (WHADVP (r CC) (r WRB))
 (WHNP (l WDT) (l WP) (l WP$) (l WHADJP) (l WHPP) (l WHNP))
 (WHPP (r IN) (r TO) (r FW))
 (X (r))
 (* (l))
)
"""


def english_treebank():
    """
    :rtype: Treebank
    """
    return Treebank(augmentation_delimiters=AUGMENTATION_DELIMITERS,
                    nonterminal_exceptions=NONTERMINAL_EXCEPTIONS,
                    base_np_label=BASE_NP,
                    canonical_label_map=CANONICAL_LABEL_MAP)


def english_language_pack(head_rules=HEAD_RULES, warn_default_rule=False, log=sys.stderr):
    """
    :param head_rules: head table in lisp notation
    :type head_rules: str
    :param warn_default_rule: warn whenever no specific head rule exists for a label
    :type warn_default_rule: bool
    :rtype: LanguagePack
    """
    treebank = english_treebank()
    head_finder = HeadFinder(treebank, head_rules, warn_default_rule=warn_default_rule, log=log)
    return LanguagePack('english', treebank, head_finder)


__all__ = ["english_treebank", "english_language_pack", "HEAD_RULES", "BASE_NP"]
