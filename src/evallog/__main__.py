# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
import sys

from evallog.cli import main

sys.exit(main())
