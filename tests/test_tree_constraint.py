import unittest
from constraints.constraint import AbstractConstraint
from constraints.constraint_set import UnlexTreeConstraintSet, LexTreeConstraintSet, PartialLexTreeConstraintSet
from constraints.items import CKYItem
from treebank.english import english_language_pack
from treebank.trees import MalformedTreeError, read_tree
from treebank.word import Word

TREE = '(S (NP-SBJ (DT the) (NN dog)) (VP (VBD barked)))'


def spans(constraint):
    return constraint.start(), constraint.end()


class TestCKYItem(unittest.TestCase):
    def test_modifiers_in_surface_order(self):
        the = CKYItem.preterminal(Word('the', 'DT'), 0)
        big = CKYItem.preterminal(Word('big', 'JJ'), 1)
        dog = CKYItem.preterminal(Word('dog', 'NN'), 2)
        barks = CKYItem.preterminal(Word('barks', 'VBZ'), 3)
        item = CKYItem.project('NP', dog).add_modifier(big).add_modifier(the).add_modifier(barks)
        self.assertEqual((item.start(), item.end()), (0, 3))
        self.assertEqual(item.left_children(), [the, big])
        self.assertEqual(item.right_children(), [barks])
        self.assertIs(item.head_child(), dog)
        self.assertEqual(item.head_word(), Word('dog', 'NN'))
        self.assertEqual(str(item), 'NP[0,3](dog/NN)')

    def test_non_adjacent_modifier(self):
        the = CKYItem.preterminal(Word('the', 'DT'), 0)
        dog = CKYItem.preterminal(Word('dog', 'NN'), 2)
        self.assertRaises(ValueError, CKYItem.project('NP', dog).add_modifier, the)


class TestAbstractConstraint(unittest.TestCase):
    def test_unsupported_operations(self):
        constraint = AbstractConstraint()
        item = CKYItem.preterminal(Word('the', 'DT'), 0)
        self.assertRaises(NotImplementedError, constraint.is_leaf)
        self.assertRaises(NotImplementedError, constraint.get_parent)
        self.assertRaises(NotImplementedError, constraint.has_been_satisfied)
        self.assertRaises(NotImplementedError, constraint.is_satisfied_by, item)
        self.assertRaises(NotImplementedError, constraint.is_locally_satisfied_by, item)
        self.assertRaises(NotImplementedError, constraint.is_violated_by, item)
        self.assertRaises(NotImplementedError, constraint.is_violated_by_child, item)


class TestUnlexTreeConstraint(unittest.TestCase):
    def setUp(self):
        self.language_pack = english_language_pack()
        self.constraint_set = UnlexTreeConstraintSet(read_tree(TREE), self.language_pack)

    def test_structure(self):
        root = self.constraint_set.root()
        np, vp = root.get_children()
        self.assertEqual(len(self.constraint_set), 6)
        self.assertEqual([root.label(), np.label(), vp.label()], ['S', 'NP', 'VP'])
        self.assertEqual([spans(root), spans(np), spans(vp)], [(0, 2), (0, 1), (2, 2)])
        self.assertEqual([leaf.label() for leaf in self.constraint_set.leaves()], ['DT', 'NN', 'VBD'])
        self.assertEqual([spans(leaf) for leaf in self.constraint_set.leaves()], [(0, 0), (1, 1), (2, 2)])
        self.assertIsNone(root.get_parent())
        self.assertIs(self.constraint_set.leaves()[2].get_parent(), vp)
        self.assertIsNone(root.head_word())

    def test_spans_partition_parent_span(self):
        for constraint in self.constraint_set:
            self.assertEqual(constraint.is_leaf(), len(constraint.get_children()) == 0)
            if constraint.is_leaf():
                self.assertEqual(constraint.start(), constraint.end())
                continue
            position = constraint.start()
            for child in constraint.get_children():
                self.assertIs(child.get_parent(), constraint)
                self.assertEqual(child.start(), position)
                position = child.end() + 1
            self.assertEqual(position - 1, constraint.end())

    def test_base_np_is_kept(self):
        constraint_set = UnlexTreeConstraintSet(read_tree('(S (NPB (NNS dogs)) (VP-1 (VBD barked)))'),
                                                self.language_pack)
        self.assertEqual([child.label() for child in constraint_set.root().get_children()], ['NPB', 'VP'])

    def test_predicates(self):
        self.assertTrue(self.constraint_set.has_tree_structure())
        self.assertTrue(self.constraint_set.find_at_least_one_satisfying())
        self.assertFalse(self.constraint_set.find_no_violations())
        item = CKYItem.preterminal(Word('the', 'DT'), 0)
        self.assertRaises(NotImplementedError, self.constraint_set.is_violated_by, item)
        self.assertRaises(NotImplementedError, self.constraint_set.root().is_violated_by, item)

    def test_preterminals_always_match(self):
        leaves = self.constraint_set.leaves()
        item = CKYItem.preterminal(Word('the', 'NN'), 0)
        self.assertIs(self.constraint_set.constraint_satisfying(item), leaves[0])
        self.assertTrue(leaves[0].has_been_satisfied())
        self.assertFalse(leaves[1].has_been_satisfied())

    def test_exact_structure_required(self):
        the = CKYItem.preterminal(Word('the', 'DT'), 0)
        dog = CKYItem.preterminal(Word('dog', 'NN'), 1)
        for item in [the, dog]:
            item.set_constraint(self.constraint_set.constraint_satisfying(item))
        np = self.constraint_set.root().get_children()[0]

        # a head child alone does not complete the NP
        self.assertIsNone(self.constraint_set.constraint_satisfying(CKYItem.project('NP', dog)))
        # wrong label
        self.assertIsNone(self.constraint_set.constraint_satisfying(CKYItem.project('VP', dog).add_modifier(the)))
        self.assertFalse(np.has_been_satisfied())

        # augmented labels match in canonical form
        item = CKYItem.project('NP-SBJ', dog).add_modifier(the)
        self.assertIs(self.constraint_set.constraint_satisfying(item), np)
        self.assertTrue(np.has_been_satisfied())

    def test_violated_by_child(self):
        the = CKYItem.preterminal(Word('the', 'DT'), 0)
        barked = CKYItem.preterminal(Word('barked', 'VBD'), 2)
        for item in [the, barked]:
            item.set_constraint(self.constraint_set.constraint_satisfying(item))
        np, vp = self.constraint_set.root().get_children()
        self.assertFalse(np.is_violated_by_child(the))
        self.assertTrue(np.is_violated_by_child(barked))
        self.assertTrue(vp.is_violated_by_child(CKYItem.preterminal(Word('barked', 'VBD'), 2)))

    def test_malformed_trees(self):
        self.assertRaises(MalformedTreeError, UnlexTreeConstraintSet, read_tree('(S (NP) (VP (VBD x)))'),
                          self.language_pack)
        self.assertRaises(MalformedTreeError, UnlexTreeConstraintSet, read_tree('(S (NP (NN a)) b)'),
                          self.language_pack)
        self.assertRaises(ValueError, UnlexTreeConstraintSet, read_tree(TREE))

    def test_str(self):
        self.assertEqual(str(self.constraint_set), '(S-0-2 (NP-0-1 (DT-0-0) (NN-1-1)) (VP-2-2 (VBD-2-2)))')
        self.assertEqual(read_tree(str(self.constraint_set)).label(), 'S-0-2')

    def test_empty_set(self):
        constraint_set = UnlexTreeConstraintSet()
        self.assertEqual(len(constraint_set), 0)
        self.assertIsNone(constraint_set.root())
        self.assertEqual(constraint_set.leaves(), [])
        self.assertEqual(str(constraint_set), '()')
        self.assertIsNone(constraint_set.constraint_satisfying(CKYItem.preterminal(Word('a', 'DT'), 0)))

    def test_preterminal_outside_sentence(self):
        leaves = self.constraint_set.leaves()
        self.assertIsNone(self.constraint_set.constraint_satisfying(CKYItem.preterminal(Word('a', 'DT'), 3)))
        self.assertIsNone(self.constraint_set.constraint_satisfying(CKYItem.preterminal(Word('a', 'VBD'), -1)))
        self.assertFalse(any(leaf.has_been_satisfied() for leaf in leaves))


class TestLexTreeConstraint(unittest.TestCase):
    def setUp(self):
        self.language_pack = english_language_pack()
        self.tree = read_tree(TREE)

    def test_head_words(self):
        constraint_set = LexTreeConstraintSet(self.tree, self.language_pack)
        root = constraint_set.root()
        np, vp = root.get_children()
        self.assertEqual(root.head_word(), Word('barked', 'VBD'))
        self.assertEqual(np.head_word(), Word('dog', 'NN'))
        self.assertEqual(vp.head_word(), Word('barked', 'VBD'))
        # labels are not canonicalized
        self.assertEqual(np.label(), 'NP-SBJ')
        self.assertEqual(root.node_label(), 'S-barked/VBD-0-2')
        self.assertEqual(root.to_tree().label(), 'S-barked/VBD-0-2')

    def test_preterminal_lookup(self):
        constraint_set = LexTreeConstraintSet(self.tree, self.language_pack)
        leaves = constraint_set.leaves()
        self.assertIs(constraint_set.constraint_satisfying(CKYItem.preterminal(Word('the', 'DT'), 0)), leaves[0])
        # only the leaf at the position of the item is consulted
        self.assertIsNone(constraint_set.constraint_satisfying(CKYItem.preterminal(Word('the', 'DT'), 2)))
        self.assertIsNone(constraint_set.constraint_satisfying(CKYItem.preterminal(Word('the', 'NN'), 0)))
        self.assertFalse(leaves[2].has_been_satisfied())

    def test_word_features(self):
        item = CKYItem.preterminal(Word('dog', 'NN', 'sg'), 1)
        lex = LexTreeConstraintSet(self.tree, self.language_pack)
        partial_lex = PartialLexTreeConstraintSet(self.tree, self.language_pack)
        self.assertIsNone(lex.constraint_satisfying(item))
        self.assertIs(partial_lex.constraint_satisfying(item), partial_lex.leaves()[1])

    def test_word_features_of_interior_items(self):
        item = CKYItem('NP-SBJ', 0, 1, head_word=Word('dog', 'NN', 'sg'))
        lex = LexTreeConstraintSet(self.tree, self.language_pack)
        partial_lex = PartialLexTreeConstraintSet(self.tree, self.language_pack)
        self.assertFalse(lex.root().get_children()[0].is_locally_satisfied_by(item))
        self.assertTrue(partial_lex.root().get_children()[0].is_locally_satisfied_by(item))
        self.assertFalse(partial_lex.root().get_children()[0].is_locally_satisfied_by(
            CKYItem('NP-SBJ', 0, 1, head_word=Word('cat', 'NN', 'sg'))))

    def test_head_word_of_interior_items(self):
        constraint_set = LexTreeConstraintSet(self.tree, self.language_pack)
        np = constraint_set.root().get_children()[0]
        the = CKYItem.preterminal(Word('the', 'DT'), 0)
        dog = CKYItem.preterminal(Word('dog', 'NN'), 1)
        for item in [the, dog]:
            item.set_constraint(constraint_set.constraint_satisfying(item))
        wrong_head = CKYItem('NP-SBJ', 0, 1, head_word=Word('the', 'DT'), head_child=the, right_children=[dog])
        self.assertFalse(np.is_locally_satisfied_by(wrong_head))
        item = CKYItem.project('NP-SBJ', dog).add_modifier(the)
        self.assertTrue(np.is_locally_satisfied_by(item))
        self.assertIs(constraint_set.constraint_satisfying(item), np)


if __name__ == '__main__':
    unittest.main()
