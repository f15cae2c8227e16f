"""Allow ``python -m questpatterns``."""
import sys

from questpatterns.cli.main import main

sys.exit(main())
