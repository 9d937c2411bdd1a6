# corpora.py - corpora of labeled email files on the filesystem
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbfilter, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""Functions for corpora that are directories of email files.

A corpus directory holds one email per file. Training corpora are kept in
one directory per class, while a test corpus mixes both classes and encodes
the true label of each email in its file name.

"""
import fnmatch
import logging
import os

from nbfilter.constants import DEFAULT_EXTENSION
from nbfilter.constants import HAM
from nbfilter.constants import SPAM
from nbfilter.constants import SPAM_MARKER
from nbfilter.tokenizer import word_freq_in_file


def get_files_in_folder(directory, extension=DEFAULT_EXTENSION):
    """Returns the sorted list of paths of the files in `directory` whose
    names end with `extension`.

    This assumes that the directory exists; :exc:`OSError` is raised
    otherwise. Subdirectories are not searched.

    """
    pattern = '*' + extension
    paths = [os.path.join(directory, filename)
             for filename in sorted(os.listdir(directory))
             if fnmatch.fnmatch(filename, pattern)]
    paths = [path for path in paths if os.path.isfile(path)]
    logging.debug('found %d files in %s', len(paths), directory)
    return paths


def get_email_label(path):
    """Returns :data:`SPAM` if the base name of the file at `path` contains
    :data:`SPAM_MARKER`, and :data:`HAM` otherwise.

    Only the file name matters; the directory in which the file lives is
    ignored.

    """
    if SPAM_MARKER in os.path.basename(path):
        return SPAM
    return HAM


def labeled_documents(paths):
    """Generates ``(word_freq, label)`` pairs, one for each file in the
    iterable `paths`, with the label inferred from the file name.

    """
    for path in paths:
        yield word_freq_in_file(path), get_email_label(path)
