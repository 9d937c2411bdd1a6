# __main__.py - allows running the package with ``python -m nbfilter``
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbfilter, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
from nbfilter.cli import main

main(prog_name='nbfilter')
