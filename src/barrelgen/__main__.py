import sys

from barrelgen.cli import main

sys.exit(main())
