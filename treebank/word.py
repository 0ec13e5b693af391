__author__ = 'kilian'


class Word:
    """
    A head word of a lexicalized constituent: the surface form, its part of speech tag
    and an optional decoration (e.g. a sense tag or word features).
    """
    def __init__(self, word, tag, features=None):
        """
        :type word: str
        :type tag: str
        :type features: str | None
        """
        self.__word = word
        self.__tag = tag
        self.__features = features

    def word(self):
        """
        :rtype: str
        """
        return self.__word

    def tag(self):
        """
        :rtype: str
        """
        return self.__tag

    def features(self):
        """
        :rtype: str | None
        """
        return self.__features

    def __eq__(self, other):
        if not isinstance(other, Word):
            return False
        return all([self.word() == other.word()
                   , self.tag() == other.tag()
                   , self.features() == other.features()])

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.__word, self.__tag, self.__features))

    def __str__(self):
        if self.__features is None:
            return self.__word + '/' + self.__tag
        return self.__word + '/' + self.__tag + '/' + self.__features

    def __repr__(self):
        return 'Word(' + ', '.join(map(repr, [self.__word, self.__tag, self.__features])) + ')'


__all__ = ["Word"]
