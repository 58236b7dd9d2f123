"""Allow ``python -m weighted_random`` to run the demo."""

import sys

from weighted_random.demo import main

sys.exit(main())
