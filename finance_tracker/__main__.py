"""Run the console session: ``python -m finance_tracker``."""

import sys

from finance_tracker.session import main

sys.exit(main())
