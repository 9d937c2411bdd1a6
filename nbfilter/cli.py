# cli.py - command-line interface for training and evaluating the filter
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbfilter, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""Command-line interface for nbfilter.

Usage::

    nbfilter evaluate --spam-dir data/spam --ham-dir data/ham \\
        --test-dir data/testing
    nbfilter evaluate --tradeoff 0.8,0.9,1.0,1.1,1.2
    nbfilter classify message1.txt message2.txt

"""
import logging

import click

from nbfilter.classifier import ClassifierOptions
from nbfilter.classifier import classify_email
from nbfilter.constants import DEFAULT_DECISION_FACTOR
from nbfilter.constants import SPAM_PRIOR
from nbfilter.corpora import get_files_in_folder
from nbfilter.corpora import labeled_documents
from nbfilter.evaluation import evaluate_filter_performance
from nbfilter.evaluation import format_summary
from nbfilter.evaluation import message_classified
from nbfilter.evaluation import tradeoff_curve
from nbfilter.trainers import learn_distributions_from_files

DEFAULT_SPAM_DIR = 'data/spam'
DEFAULT_HAM_DIR = 'data/ham'
DEFAULT_TEST_DIR = 'data/testing'

directory = click.Path(exists=True, file_okay=False, dir_okay=True)


def _parse_factors(ctx, param, value):
    if value is None:
        return []
    try:
        return [float(s) for s in value.split(',') if s.strip()]
    except ValueError:
        raise click.BadParameter('expected comma-separated numbers')


def _learn(spam_dir, ham_dir):
    training_files = (get_files_in_folder(spam_dir),
                      get_files_in_folder(ham_dir))
    return learn_distributions_from_files(training_files)


def _options(decision_factor, spam_prior):
    try:
        return ClassifierOptions(decision_factor, (spam_prior, 1 - spam_prior))
    except ValueError as exception:
        raise click.BadParameter(str(exception), param_hint='--spam-prior')


def _log_classification(sender, document, label, classification):
    logging.debug('true class %s, predicted %s, log posteriors %r',
                  label.name.lower(), classification.label.name.lower(),
                  classification.log_posteriors)


training_options = [
    click.option('--spam-dir', type=directory, default=DEFAULT_SPAM_DIR,
                 show_default=True, help='Directory of spam training emails.'),
    click.option('--ham-dir', type=directory, default=DEFAULT_HAM_DIR,
                 show_default=True, help='Directory of ham training emails.'),
    click.option('--decision-factor', type=float,
                 default=DEFAULT_DECISION_FACTOR, show_default=True,
                 help='Multiplier of the ham log-probability in the decision'
                 ' rule.'),
    click.option('--spam-prior', type=float, default=SPAM_PRIOR,
                 show_default=True,
                 help='Prior probability that an email is spam.'),
]


def with_training_options(f):
    for option in reversed(training_options):
        f = option(f)
    return f


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Log debug messages.')
@click.version_option(package_name='nbfilter')
def main(verbose):
    """Multinomial naive Bayes spam filter."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format='%(levelname)s: %(message)s')


@main.command()
@with_training_options
@click.option('--test-dir', type=directory, default=DEFAULT_TEST_DIR,
              show_default=True,
              help='Directory of test emails; spam has "spam" in its name.')
@click.option('--tradeoff', callback=_parse_factors, default=None,
              help='Comma-separated decision factors for which to report'
              ' type I and type II error rates.')
def evaluate(spam_dir, ham_dir, decision_factor, spam_prior, test_dir,
             tradeoff):
    """Train on the spam and ham directories and test on the test
    directory.

    """
    options = _options(decision_factor, spam_prior)
    distributions = _learn(spam_dir, ham_dir)
    message_classified.connect(_log_classification)
    try:
        matrix = evaluate_filter_performance(test_dir, distributions, options)
        click.echo(format_summary(matrix))
        if tradeoff:
            test_docs = labeled_documents(get_files_in_folder(test_dir))
            curve = tradeoff_curve(test_docs, distributions, tradeoff,
                                   options.priors)
            for factor, (type1, type2) in zip(tradeoff, curve):
                click.echo('{}\t{:.4f}\t{:.4f}'.format(factor, type1, type2))
    except ValueError as exception:
        raise click.ClickException(str(exception))
    finally:
        message_classified.disconnect(_log_classification)


@main.command()
@with_training_options
@click.argument('emails', nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False))
def classify(spam_dir, ham_dir, decision_factor, spam_prior, emails):
    """Train on the spam and ham directories and classify each EMAIL."""
    options = _options(decision_factor, spam_prior)
    distributions = _learn(spam_dir, ham_dir)
    for path in emails:
        try:
            result = classify_email(path, distributions, options)
        except ValueError as exception:
            raise click.ClickException(str(exception))
        log_spam, log_ham = result.log_posteriors
        click.echo('{}\t{}\t{}\t{}'.format(path, result.label.name.lower(),
                                           log_spam, log_ham))
