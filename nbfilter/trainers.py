# trainers.py - objects which learn from corpora
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbfilter, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""Learning of word distributions from training corpora.

For each class, the word counts of all training documents of that class are
summed, and each word `w` seen `f` times across the `n` training documents of
the class is given the smoothed estimate

    P(w|class) = (f + 1) / (n + 2)

This is add-one smoothing over the number of *documents*, not over the size
of the vocabulary. A word never seen in a class's training documents gets the
floor estimate ``1 / (n + 2)`` at classification time; it is never inserted
into the table.

Note that the estimate is not clamped. When a word occurs more than ``n + 1``
times in total, for example a word repeated many times in a handful of
training emails, its estimate is greater than one.

"""
import logging
import math
from types import MappingProxyType

from nbfilter.constants import EmailClass
from nbfilter.constants import HAM
from nbfilter.constants import SPAM
from nbfilter.tokenizer import word_freq_in_file


class DegenerateTrainingSetError(ValueError):
    """Raised when a class has no training documents.

    Without training documents the floor probability ``1 / (n + 2)`` for
    unseen words and the class tables carry no information about the class,
    so the classifier refuses to run rather than produce meaningless scores.

    """

    def __init__(self, category):
        self.category = EmailClass(category)
        msg = 'no training documents for class {}'.format(self.category.name)
        super().__init__(msg)


class Distributions(object):
    """The trained model: one table of smoothed word probabilities and one
    training document count per class.

    `probabilities_by_category` is a two-element sequence of mappings from
    word to P(word|class), spam first. `num_docs_by_category` is a
    two-element sequence with the number of training documents of each
    class, spam first.

    Instances are read-only once created and may be shared freely between
    classification calls.

    """

    __slots__ = '_tables', '_num_docs'

    def __init__(self, probabilities_by_category, num_docs_by_category):
        spam_table, ham_table = probabilities_by_category
        self._tables = (MappingProxyType(dict(spam_table)),
                        MappingProxyType(dict(ham_table)))
        nspam, nham = num_docs_by_category
        self._num_docs = (int(nspam), int(nham))

    def __repr__(self):
        return 'Distributions(nspam={}, nham={}, words={})'.format(
            self.nspam, self.nham, tuple(len(t) for t in self._tables))

    @property
    def nspam(self):
        """The number of spam documents used for training."""
        return self._num_docs[SPAM]

    @property
    def nham(self):
        """The number of ham documents used for training."""
        return self._num_docs[HAM]

    def table(self, category):
        """Returns the read-only probability table of `category`."""
        return self._tables[category]

    def num_docs(self, category):
        """Returns the number of training documents of `category`."""
        return self._num_docs[category]

    def probability(self, word, category):
        """Returns the estimate of P(`word` | `category`).

        Words that never occurred in a training document of `category` get
        the floor estimate given by :meth:`unknown_word_prob`.

        """
        try:
            return self._tables[category][word]
        except KeyError:
            return self.unknown_word_prob(category)

    def unknown_word_prob(self, category):
        """Returns the floor estimate ``1 / (n + 2)`` used for words never
        seen in the training documents of `category`.

        """
        return 1 / (self._num_docs[category] + 2)

    def log_probability(self, word, category):
        """Returns the natural logarithm of :meth:`probability`."""
        return math.log(self.probability(word, category))

    def check(self):
        """Raises :exc:`DegenerateTrainingSetError` unless each class has at
        least one training document.

        """
        for category in EmailClass:
            if self._num_docs[category] <= 0:
                raise DegenerateTrainingSetError(category)


def learn_distributions(docs_by_category):
    """Estimates P(w|SPAM) and P(w|HAM) for every word in the training set.

    `docs_by_category` is a two-element sequence. The first element is a
    list of word frequency mappings, one for each spam training document, and
    the second is the same for ham documents.

    Returns an instance of :class:`Distributions`. Empty document lists are
    accepted and yield an empty table with a document count of zero; it is
    the classifier that refuses to work with such a model.

    """
    spam_docs, ham_docs = docs_by_category
    tables = []
    num_docs = []
    for category, docs in ((SPAM, spam_docs), (HAM, ham_docs)):
        freq = {}
        n = 0
        for doc in docs:
            n += 1
            for word, count in doc.items():
                freq[word] = freq.get(word, 0) + count
        denominator = n + 2
        tables.append({word: (f + 1) / denominator
                       for word, f in freq.items()})
        num_docs.append(n)
        logging.debug('learned %d distinct words from %d %s documents',
                      len(freq), n, category.name.lower())
    return Distributions(tables, num_docs)


def learn_distributions_from_files(file_lists_by_category):
    """Convenience function which reads each file in the two-element sequence
    `file_lists_by_category` (spam files first, ham files second) and learns
    the distributions from their word frequencies.

    """
    docs_by_category = []
    for files in file_lists_by_category:
        docs_by_category.append([word_freq_in_file(path) for path in files])
    return learn_distributions(docs_by_category)
