# __init__.py - indicates that this directory is a Python package
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbfilter, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
from .classifier import Classification
from .classifier import ClassifierOptions
from .classifier import classify
from .classifier import classify_email
from .constants import EmailClass
from .constants import HAM
from .constants import SPAM
from .evaluation import error_rates
from .evaluation import evaluate
from .evaluation import evaluate_filter_performance
from .evaluation import format_summary
from .evaluation import message_classified
from .evaluation import summarize
from .evaluation import tradeoff_curve
from .trainers import DegenerateTrainingSetError
from .trainers import Distributions
from .trainers import learn_distributions
from .trainers import learn_distributions_from_files
