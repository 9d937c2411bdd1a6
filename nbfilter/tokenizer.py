# tokenizer.py - tokenizes email messages for later statistical analysis
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbfilter, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""Module to tokenize email messages for spam filtering.

A token is simply a run of non-whitespace characters. No case folding,
stripping of punctuation, or header handling is done: the multinomial model
works on raw word counts, so ``Free`` and ``free!`` are distinct words.

"""
from collections import Counter

from nbfilter.constants import ENCODING


def tokenize(text):
    """Generates the whitespace-delimited words in the string `text`, in the
    order in which they appear.

    """
    # str.split() with no separator never yields empty strings.
    yield from text.split()


def words_in_file(path):
    """Returns the list of words in the file at `path`, with repetition."""
    with open(path, encoding=ENCODING, errors='replace') as f:
        return list(tokenize(f.read()))


def word_freq(words):
    """Returns a :class:`collections.Counter` mapping each word in the
    iterable `words` to the number of times it occurs.

    """
    return Counter(word for word in words if word)


def word_freq_in_file(path):
    """Returns the word frequencies of the single file at `path`."""
    return word_freq(words_in_file(path))


def word_freq_in_files(paths):
    """Returns the word frequencies aggregated over all the files in the
    iterable `paths`.

    """
    freq = Counter()
    for path in paths:
        freq.update(words_in_file(path))
    return freq
