# classifier.py - a multinomial naive Bayes classifier for messages
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbfilter, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""An implementation of a multinomial naive Bayes spam classifier.

A document is modeled as a bag of words drawn independently from a
class-specific distribution. For a document in which word `w` occurs `f_w`
times, with ``N = sum(f_w)``, the likelihood of the words under class `c` is
multinomial:

    ln P(words|c) = lnG(N + 1) - sum(lnG(f_w + 1)) + sum(f_w * ln P(w|c))

where ``lnG`` is the log-gamma function. The multinomial coefficient (the
first two terms) is the same for both classes, so it does not change the
decision, but it is included so that the joint probabilities are true
probabilities.

Everything is computed in log space. The product of a few hundred word
probabilities underflows a double long before a real email ends, and so does
the naive normalization ``exp(a) / (exp(a) + exp(b))`` of the joint
probabilities; :func:`logsumexp` avoids the latter by factoring out the
largest term first.

"""
import collections
import logging
import math

from nbfilter.constants import DEFAULT_DECISION_FACTOR
from nbfilter.constants import EmailClass
from nbfilter.constants import HAM
from nbfilter.constants import HAM_PRIOR
from nbfilter.constants import SPAM
from nbfilter.constants import SPAM_PRIOR
from nbfilter.tokenizer import word_freq_in_file

#: The result of classifying a single document.
#:
#: `label` is either :data:`SPAM` or :data:`HAM`. `log_posteriors` is a pair
#: containing ``ln P(SPAM|document)`` and ``ln P(HAM|document)``, in that
#: order.
Classification = collections.namedtuple('Classification',
                                        'label log_posteriors')


def logsumexp(values):
    """Returns ``ln(sum(exp(x) for x in values))`` without overflow or
    underflow for values of large magnitude.

    """
    values = list(values)
    m = max(values)
    if math.isinf(m):
        return m
    return m + math.log(sum(math.exp(x - m) for x in values))


class ClassifierOptions(object):
    """The tunable parameters of the decision rule.

    `decision_factor` multiplies the joint log-probability of ham before it
    is compared with that of spam: a document is classified as spam if and
    only if ``ln P(SPAM, words) > decision_factor * ln P(HAM, words)``.
    Varying it trades false positives against false negatives.

    `priors` is a two-element sequence with the prior probabilities of spam
    and ham, in that order. Both must be strictly positive; they are not
    required to sum to one, although the normalized posteriors are only
    meaningful in that case.

    """

    __slots__ = 'decision_factor', 'priors'

    def __init__(self, decision_factor=DEFAULT_DECISION_FACTOR,
                 priors=(SPAM_PRIOR, HAM_PRIOR)):
        spam_prior, ham_prior = priors
        if not (spam_prior > 0 and ham_prior > 0):
            msg = 'prior probabilities must be positive, got {!r}'
            raise ValueError(msg.format(tuple(priors)))
        self.decision_factor = float(decision_factor)
        self.priors = (float(spam_prior), float(ham_prior))

    def __repr__(self):
        return 'ClassifierOptions(decision_factor={!r}, priors={!r})'.format(
            self.decision_factor, self.priors)

    def __eq__(self, other):
        if not isinstance(other, ClassifierOptions):
            return NotImplemented
        return (self.decision_factor, self.priors) == \
            (other.decision_factor, other.priors)

    def __hash__(self):
        return hash((self.decision_factor, self.priors))

    def log_prior(self, category):
        return math.log(self.priors[category])


#: The options used when none are given: equal priors and a plain maximum a
#: posteriori decision.
DEFAULT_OPTIONS = ClassifierOptions()


def joint_log_probabilities(doc, distributions, options=DEFAULT_OPTIONS):
    """Returns the pair ``(ln P(SPAM, words), ln P(HAM, words))`` for the
    document whose word frequencies are given by the mapping `doc`.

    `distributions` is the :class:`~nbfilter.trainers.Distributions` returned
    by :func:`~nbfilter.trainers.learn_distributions`.

    An empty document is valid; its joint probabilities are just the priors.

    """
    distributions.check()
    # The floor for words missing from a table is looked up once per class
    # rather than once per unseen word.
    tables = [distributions.table(category) for category in EmailClass]
    unknown = [math.log(distributions.unknown_word_prob(category))
               for category in EmailClass]
    log_likelihoods = [0.0, 0.0]
    num_words = 0
    log_denominator = 0.0
    for word, count in doc.items():
        num_words += count
        log_denominator += math.lgamma(count + 1)
        for category in EmailClass:
            prob = tables[category].get(word)
            if prob is None:
                log_likelihoods[category] += count * unknown[category]
            else:
                log_likelihoods[category] += count * math.log(prob)
    coefficient = math.lgamma(num_words + 1) - log_denominator
    return tuple(options.log_prior(category) + coefficient +
                 log_likelihoods[category] for category in EmailClass)


def decide(joint, decision_factor=DEFAULT_DECISION_FACTOR):
    """Returns :data:`SPAM` if the spam joint log-probability strictly
    exceeds `decision_factor` times the ham joint log-probability, and
    :data:`HAM` otherwise (including on a tie).

    """
    if joint[SPAM] > decision_factor * joint[HAM]:
        return SPAM
    return HAM


def classify(doc, distributions, options=None):
    """Uses naive Bayes classification to classify the document whose word
    frequencies are given by the mapping `doc`.

    `distributions` is the trained model returned by
    :func:`~nbfilter.trainers.learn_distributions`, and `options` is an
    instance of :class:`ClassifierOptions` (the defaults are used if it is
    ``None``).

    Returns a :class:`Classification`. Raises
    :exc:`~nbfilter.trainers.DegenerateTrainingSetError` if either class has
    no training documents.

    """
    if options is None:
        options = DEFAULT_OPTIONS
    joint = joint_log_probabilities(doc, distributions, options)
    label = decide(joint, options.decision_factor)
    evidence = logsumexp(joint)
    log_posteriors = tuple(x - evidence for x in joint)
    return Classification(label, log_posteriors)


def classify_email(path, distributions, options=None):
    """Classifies the email in the file at `path`.

    This is a convenience function for :func:`classify` which first counts
    the words in the file.

    """
    result = classify(word_freq_in_file(path), distributions, options)
    logging.debug('classified %s as %s %r', path, result.label.name.lower(),
                  result.log_posteriors)
    return result
