# test_evaluation.py - unit tests for the nbfilter.evaluation module
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbfilter, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
import random
from collections import Counter

import numpy
import pytest

from nbfilter import ClassifierOptions
from nbfilter import DegenerateTrainingSetError
from nbfilter import HAM
from nbfilter import SPAM
from nbfilter import error_rates
from nbfilter import evaluate
from nbfilter import format_summary
from nbfilter import learn_distributions
from nbfilter import message_classified
from nbfilter import summarize
from nbfilter import tradeoff_curve

SPAM_DOCS = [Counter({'free': 3, 'win': 1}), Counter({'free': 1, 'win': 2})]
HAM_DOCS = [Counter({'meeting': 2, 'free': 1}), Counter({'meeting': 3})]

TEST_DOCS = [
    (Counter({'win': 2, 'free': 1}), SPAM),
    (Counter({'free': 4}), SPAM),
    # Classified as ham, a false negative.
    (Counter({'meeting': 1, 'win': 1}), SPAM),
    (Counter({'meeting': 2}), HAM),
    (Counter({'meeting': 1, 'agenda': 1}), HAM),
    # Classified as spam, a false positive.
    (Counter({'win': 1}), HAM),
]


@pytest.fixture
def distributions():
    return learn_distributions((SPAM_DOCS, HAM_DOCS))


def test_evaluate(distributions):
    matrix = evaluate(TEST_DOCS, distributions)
    assert matrix.tolist() == [[2, 1], [1, 2]]


def test_order_independent(distributions):
    expected = evaluate(TEST_DOCS, distributions)
    shuffled = list(TEST_DOCS)
    random.Random(0).shuffle(shuffled)
    assert numpy.array_equal(evaluate(shuffled, distributions), expected)
    reverse = list(reversed(TEST_DOCS))
    assert numpy.array_equal(evaluate(reverse, distributions), expected)


def test_empty_test_set(distributions):
    matrix = evaluate([], distributions)
    assert matrix.tolist() == [[0, 0], [0, 0]]
    assert error_rates(matrix) == (0.0, 0.0)


def test_summary(distributions):
    matrix = evaluate(TEST_DOCS, distributions)
    summary = summarize(matrix)
    assert summary.spam_correct == 2
    assert summary.total_spam == 3
    assert summary.ham_correct == 2
    assert summary.total_ham == 3
    assert format_summary(matrix) == ('Correctly classified 2 out of 3 spam'
                                      ' emails, and 2 out of 3 ham emails')


def test_error_rates(distributions):
    matrix = evaluate(TEST_DOCS, distributions)
    type1, type2 = error_rates(matrix)
    assert type1 == pytest.approx(1 / 3)
    assert type2 == pytest.approx(1 / 3)


def test_tradeoff_curve(distributions):
    docs = iter(TEST_DOCS)
    curve = tradeoff_curve(docs, distributions, [1.0, 100.0])
    assert len(curve) == 2
    assert curve[0] == error_rates(evaluate(TEST_DOCS, distributions))
    # A large decision factor trades false negatives for false positives.
    assert curve[1].type1 == pytest.approx(2 / 3)
    assert curve[1].type2 == 0.0


def test_degenerate_training_set():
    distributions = learn_distributions(([], HAM_DOCS))
    with pytest.raises(DegenerateTrainingSetError):
        evaluate(TEST_DOCS, distributions)


def test_message_classified_signal(distributions):
    received = []

    def receiver(sender, document, label, classification):
        received.append((sender, label, classification.label))

    message_classified.connect(receiver)
    try:
        evaluate(TEST_DOCS[:2], distributions, ClassifierOptions())
    finally:
        message_classified.disconnect(receiver)
    assert received == [(distributions, SPAM, SPAM),
                        (distributions, SPAM, SPAM)]
