from __future__ import print_function

import sys
from constraints.constraint_set import UnlexTreeConstraintSet, LexTreeConstraintSet, \
    PartialLexTreeConstraintSet, PartialTreeConstraintSet
from treebank.english import english_language_pack
from treebank.trees import read_tree

__author__ = 'kilian'

CONSTRAINT_SET_FACTORY = 'constraint_set_factory'
DEFAULT_CONSTRAINT_SET = 'partial-tree'


class ConstraintSettings:
    def __init__(self, constraint_set_factory=DEFAULT_CONSTRAINT_SET):
        """
        :param constraint_set_factory: name of the constraint set kind, see the_constraint_set_factory
        :type constraint_set_factory: str | None
        """
        self.constraint_set_factory = constraint_set_factory

    def update(self, changed_settings):
        """
        :type changed_settings: dict[str, str]
        """
        for key in changed_settings:
            if key not in self.__dict__:
                raise KeyError("unknown setting " + key)
            setattr(self, key, changed_settings[key])

    def __str__(self):
        __str = "Constraint Settings {\n"
        for key in self.__dict__:
            if not key.startswith("__"):
                __str += "\t" + key + ": " + str(self.__dict__[key]) + "\n"
        return __str + "}"


class ConstraintSetFactory:
    def __init__(self):
        self.__constraint_sets = {}

    def register_constraint_set(self, name, constraint_set):
        """
        :type name: str
        :param constraint_set: constructor taking an optional reference tree and a language pack
        """
        self.__constraint_sets[name] = constraint_set

    def get_constraint_set(self, name):
        """
        :type name: str
        :raises KeyError: if no constraint set is registered under name
        """
        return self.__constraint_sets[name]

    def names(self):
        return sorted(self.__constraint_sets)


def the_constraint_set_factory():
    """
    :rtype: ConstraintSetFactory
    """
    factory = ConstraintSetFactory()
    factory.register_constraint_set('partial-tree', PartialTreeConstraintSet)
    factory.register_constraint_set('unlex-tree', UnlexTreeConstraintSet)
    factory.register_constraint_set('lex-tree', LexTreeConstraintSet)
    factory.register_constraint_set('partial-lex-tree', PartialLexTreeConstraintSet)
    return factory


class ConstraintSets:
    """
    Creates the constraint sets of the kind selected by the settings. A kind that is not
    configured or not registered is replaced by the default kind (partial-tree), and a
    diagnostic is printed to the log.
    """
    def __init__(self, settings=None, language_pack=None, factory=None, log=sys.stderr):
        """
        :type settings: ConstraintSettings
        :type language_pack: treebank.language_pack.LanguagePack
        :type factory: ConstraintSetFactory
        :param log: stream for diagnostics
        """
        self.__settings = settings if settings is not None else ConstraintSettings()
        self.__language_pack = language_pack
        self.__factory = factory if factory is not None else the_constraint_set_factory()
        self.__log = log
        self.__constraint_set = self.__select()

    def __select(self):
        name = self.__settings.constraint_set_factory
        if name is None:
            print(self.__class__.__name__ + ": error: the setting " + CONSTRAINT_SET_FACTORY + " was not set;",
                  "using " + DEFAULT_CONSTRAINT_SET, file=self.__log)
            return self.__factory.get_constraint_set(DEFAULT_CONSTRAINT_SET)
        try:
            return self.__factory.get_constraint_set(name)
        except KeyError:
            print(self.__class__.__name__ + ": error: unknown constraint set " + repr(name)
                  + " (known: " + ', '.join(self.__factory.names()) + ");",
                  "using " + DEFAULT_CONSTRAINT_SET + " instead", file=self.__log)
            return self.__factory.get_constraint_set(DEFAULT_CONSTRAINT_SET)

    def constraint_set_class(self):
        return self.__constraint_set

    def language_pack(self):
        """
        :rtype: treebank.language_pack.LanguagePack
        """
        if self.__language_pack is None:
            self.__language_pack = english_language_pack(log=self.__log)
        return self.__language_pack

    def get(self, tree=None):
        """
        :param tree: reference tree, as nltk.Tree or in bracketed notation; None for an empty set
        :rtype: constraints.constraint_set.ConstraintSet
        """
        if tree is None:
            return self.__constraint_set()
        if isinstance(tree, str):
            tree = read_tree(tree)
        return self.__constraint_set(tree, self.language_pack())

    def update(self, changed_settings):
        """
        Applies changed settings and selects the constraint set kind anew if it is affected.

        :type changed_settings: dict[str, str]
        """
        self.__settings.update(changed_settings)
        if CONSTRAINT_SET_FACTORY in changed_settings:
            self.__constraint_set = self.__select()


__all__ = ["ConstraintSettings", "ConstraintSetFactory", "the_constraint_set_factory", "ConstraintSets",
           "DEFAULT_CONSTRAINT_SET"]
