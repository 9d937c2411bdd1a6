# evaluation.py - measures the performance of a trained classifier
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbfilter, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""Evaluation of a trained classifier over a labeled test set.

The result of an evaluation is a performance matrix, a 2 x 2 integer array
indexed by ``[true_class, predicted_class]``::

    [ #(SPAM|SPAM)  #(HAM|SPAM)
      #(SPAM|HAM)   #(HAM|HAM)  ]

where, for example, #(HAM|SPAM) is the number of emails which belong to the
spam class and were classified as ham.

"""
import collections
import logging

import numpy
from blinker import signal

from nbfilter.classifier import ClassifierOptions
from nbfilter.classifier import DEFAULT_OPTIONS
from nbfilter.classifier import classify
from nbfilter.constants import HAM
from nbfilter.constants import SPAM
from nbfilter.corpora import get_files_in_folder
from nbfilter.corpora import labeled_documents

#: A signal that is emitted each time a test document is classified during an
#: evaluation.
#:
#: Subscribers to this signal receive the trained distributions as the sender,
#: along with the keyword arguments ``document`` (the word frequencies),
#: ``label`` (the true class) and ``classification`` (the
#: :class:`~nbfilter.classifier.Classification`).
message_classified = signal('message-classified')

#: Summary counts derived from a performance matrix.
Summary = collections.namedtuple(
    'Summary', 'spam_correct total_spam ham_correct total_ham')

#: The type I error (the fraction of ham classified as spam) and the type II
#: error (the fraction of spam classified as ham) of an evaluation.
ErrorPair = collections.namedtuple('ErrorPair', 'type1 type2')

SUMMARY_FORMAT = ('Correctly classified {0.spam_correct} out of '
                  '{0.total_spam} spam emails, and {0.ham_correct} out of '
                  '{0.total_ham} ham emails')


def new_performance_matrix():
    """Returns a performance matrix with all counts set to zero."""
    return numpy.zeros((2, 2), dtype=int)


def evaluate(test_docs, distributions, options=None):
    """Classifies each document in `test_docs` and returns the resulting
    performance matrix.

    `test_docs` is an iterable of ``(word_freq, label)`` pairs, where `label`
    is the true class of the document. `distributions` and `options` are as
    for :func:`~nbfilter.classifier.classify`.

    The order of the documents does not affect the result. Raises
    :exc:`~nbfilter.trainers.DegenerateTrainingSetError` before classifying
    anything if either class has no training documents.

    """
    if options is None:
        options = DEFAULT_OPTIONS
    distributions.check()
    matrix = new_performance_matrix()
    for doc, label in test_docs:
        result = classify(doc, distributions, options)
        matrix[label, result.label] += 1
        message_classified.send(distributions, document=doc, label=label,
                                classification=result)
    return matrix


def summarize(matrix):
    """Returns the :class:`Summary` of the performance matrix `matrix`."""
    return Summary(spam_correct=int(matrix[SPAM, SPAM]),
                   total_spam=int(matrix[SPAM].sum()),
                   ham_correct=int(matrix[HAM, HAM]),
                   total_ham=int(matrix[HAM].sum()))


def format_summary(matrix):
    """Returns a human-readable description of the accuracy recorded in the
    performance matrix `matrix`.

    """
    return SUMMARY_FORMAT.format(summarize(matrix))


def error_rates(matrix):
    """Returns the :class:`ErrorPair` of the performance matrix `matrix`.

    If there are no test documents of a class, the corresponding error rate is
    zero.

    """
    summary = summarize(matrix)
    type1 = type2 = 0.0
    if summary.total_ham:
        type1 = int(matrix[HAM, SPAM]) / summary.total_ham
    if summary.total_spam:
        type2 = int(matrix[SPAM, HAM]) / summary.total_spam
    return ErrorPair(type1, type2)


def tradeoff_curve(test_docs, distributions, decision_factors,
                   priors=DEFAULT_OPTIONS.priors):
    """Returns a list with one :class:`ErrorPair` for each decision factor in
    `decision_factors`, in the same order, showing how the two kinds of
    error trade off against each other.

    `test_docs` is materialized once, so it may be a generator.

    """
    test_docs = list(test_docs)
    curve = []
    for decision_factor in decision_factors:
        options = ClassifierOptions(decision_factor, priors)
        errors = error_rates(evaluate(test_docs, distributions, options))
        logging.debug('decision factor %s: type I error %.4f, '
                      'type II error %.4f', decision_factor, *errors)
        curve.append(errors)
    return curve


def evaluate_filter_performance(test_dir, distributions, options=None):
    """Tests the filter over the emails in the directory `test_dir`.

    The true label of each email is inferred from its file name by
    :func:`~nbfilter.corpora.get_email_label`. The summary is logged at the
    ``INFO`` level, and the performance matrix is returned.

    """
    test_files = get_files_in_folder(test_dir)
    matrix = evaluate(labeled_documents(test_files), distributions, options)
    logging.info(format_summary(matrix))
    return matrix
