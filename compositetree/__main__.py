"""Run the compositetree demonstration: python -m compositetree"""

import sys

from .client import main

if __name__ == "__main__":
    sys.exit(main())
