#!/usr/bin/env python3

# Copyright (C) 2020-2022 The zerucrypt developers
#
# This file is part of zerucrypt. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of zerucrypt including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the zerucrypt package."

name = "zerucrypt"
__version__ = "2022.5.3"
__author__ = "The zerucrypt developers"
__author_email__ = "devs@zerucrypt.org"
__copyright__ = "Copyright (C) 2020-2022 The zerucrypt developers"
__license__ = "MIT License"
