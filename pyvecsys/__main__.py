import sys

from pyvecsys.cli import main

sys.exit(main())
