# constants.py - constant variables used in multiple modules
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbfilter, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
import enum


class EmailClass(enum.IntEnum):
    """The two mutually exclusive classes of email.

    The integer values index the two-element pairs used throughout the
    package (for example, ``priors[EmailClass.HAM]``) and the rows and
    columns of the performance matrix.

    """
    SPAM = 0
    HAM = 1


SPAM = EmailClass.SPAM
HAM = EmailClass.HAM

#: There is no a priori reason for an incoming message to be spam rather than
#: ham, so by default both classes are considered equally probable.
SPAM_PRIOR = 0.5
HAM_PRIOR = 1 - SPAM_PRIOR

#: The multiplier applied to the joint log-probability of ham before it is
#: compared with that of spam. While the ham quantity is negative, values
#: greater than one make a spam decision easier and values less than one make
#: it harder. At 1 the rule is plain maximum a posteriori, with ties going to
#: ham.
DEFAULT_DECISION_FACTOR = 1.0

#: Only files with this extension are considered to be emails when listing
#: the contents of a corpus directory.
DEFAULT_EXTENSION = '.txt'

#: An email whose file name contains this string is labeled as spam; any
#: other email is labeled as ham.
SPAM_MARKER = 'spam'

#: The encoding used to read email files. Bytes that cannot be decoded are
#: replaced rather than raising an error, since corpora of real spam are
#: rarely clean.
ENCODING = 'utf-8'
