# test_classifier.py - unit tests for the nbfilter.classifier module
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbfilter, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
import math
from collections import Counter

import pytest

from nbfilter import ClassifierOptions
from nbfilter import DegenerateTrainingSetError
from nbfilter import HAM
from nbfilter import SPAM
from nbfilter import classify
from nbfilter import learn_distributions
from nbfilter.classifier import decide
from nbfilter.classifier import joint_log_probabilities
from nbfilter.classifier import logsumexp

SPAM_DOCS = [Counter({'free': 3, 'win': 1}), Counter({'free': 1, 'win': 2})]
HAM_DOCS = [Counter({'meeting': 2, 'free': 1}), Counter({'meeting': 3})]


@pytest.fixture
def distributions():
    return learn_distributions((SPAM_DOCS, HAM_DOCS))


def assert_normalized(result):
    total = sum(math.exp(x) for x in result.log_posteriors)
    assert total == pytest.approx(1.0, rel=1e-6)


def test_classifier(distributions):
    result = classify(Counter({'win': 2, 'free': 1}), distributions)
    assert result.label == SPAM
    assert_normalized(result)
    result = classify(Counter({'meeting': 2}), distributions)
    assert result.label == HAM
    assert_normalized(result)


def test_joint_log_probabilities(distributions):
    doc = Counter({'free': 2, 'meeting': 1})
    spam, ham = joint_log_probabilities(doc, distributions)
    # 3! / (2! 1!) orderings of the three words.
    coefficient = math.log(3)
    expected_spam = (math.log(0.5) + coefficient + 2 * math.log(5 / 4) +
                     math.log(1 / 4))
    expected_ham = (math.log(0.5) + coefficient + 2 * math.log(2 / 4) +
                    math.log(6 / 4))
    assert spam == pytest.approx(expected_spam)
    assert ham == pytest.approx(expected_ham)


def test_unseen_words(distributions):
    doc = Counter({'zebra': 1, 'quokka': 4})
    spam, ham = joint_log_probabilities(doc, distributions)
    assert math.isfinite(spam)
    assert math.isfinite(ham)
    # Both classes have two training documents, so the floors are equal.
    assert spam == ham
    expected = (math.log(0.5) + math.lgamma(6) - math.lgamma(5) +
                5 * math.log(1 / 4))
    assert spam == pytest.approx(expected)
    assert_normalized(classify(doc, distributions))


def test_empty_document(distributions):
    result = classify(Counter(), distributions)
    assert result.log_posteriors == (math.log(0.5), math.log(0.5))
    assert result.label == HAM


def test_ties_go_to_ham():
    assert decide((-3.0, -3.0)) == HAM
    assert decide((-2.9, -3.0)) == SPAM
    assert decide((-3.1, -3.0)) == HAM


def test_decision_factor():
    # -4 > 1.5 * -3 = -4.5
    assert decide((-4.0, -3.0), 1.5) == SPAM
    assert decide((-4.0, -3.0), 1.0) == HAM


def test_decision_factor_changes_label(distributions):
    doc = Counter({'meeting': 1, 'win': 1})
    default = classify(doc, distributions)
    options = ClassifierOptions(decision_factor=100.0)
    shifted = classify(doc, distributions, options)
    assert shifted.label == SPAM
    # The posteriors do not depend on the decision factor.
    assert shifted.log_posteriors == default.log_posteriors


def test_priors(distributions):
    options = ClassifierOptions(priors=(0.9, 0.1))
    result = classify(Counter(), distributions, options)
    assert result.label == SPAM
    assert result.log_posteriors[SPAM] == pytest.approx(math.log(0.9))
    assert result.log_posteriors[HAM] == pytest.approx(math.log(0.1))


def test_invalid_priors():
    with pytest.raises(ValueError):
        ClassifierOptions(priors=(0.0, 1.0))
    with pytest.raises(ValueError):
        ClassifierOptions(priors=(0.5, -0.5))


def test_options_equality():
    assert ClassifierOptions() == ClassifierOptions(1, [0.5, 0.5])
    assert ClassifierOptions(2.0) != ClassifierOptions()


def test_long_document_does_not_underflow(distributions):
    doc = Counter({'free': 5000, 'win': 5000, 'meeting': 10})
    result = classify(doc, distributions)
    assert result.label == SPAM
    assert all(math.isfinite(x) for x in result.log_posteriors)
    assert_normalized(result)


def test_degenerate_training_set():
    distributions = learn_distributions((SPAM_DOCS, []))
    with pytest.raises(DegenerateTrainingSetError):
        classify(Counter({'free': 1}), distributions)
    with pytest.raises(DegenerateTrainingSetError):
        classify(Counter(), distributions)


def test_logsumexp():
    assert logsumexp([math.log(0.25), math.log(0.75)]) == pytest.approx(0.0)
    assert logsumexp([-10000.0, -10000.0]) == \
        pytest.approx(-10000.0 + math.log(2))
    assert logsumexp([-math.inf, -math.inf]) == -math.inf
