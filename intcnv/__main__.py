import sys

from intcnv.cli import main

sys.exit(main())
