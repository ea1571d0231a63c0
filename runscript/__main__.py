import sys

from runscript.cli import main

sys.exit(main())
