import sys

from easypact.cli.cli import main

sys.exit(main())
